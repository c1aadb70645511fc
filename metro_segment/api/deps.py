from fastapi import Depends

from metro_segment.algorithms.network import NetworkModel
from metro_segment.db.cache import get_network
from metro_segment.services.route_service import RouteService
from metro_segment.services.segment_service import SegmentService


def get_network_model() -> NetworkModel:
    return get_network()


def get_segment_service(
    network: NetworkModel = Depends(get_network_model),
) -> SegmentService:
    return SegmentService(network)


def get_route_service(
    network: NetworkModel = Depends(get_network_model),
    segment_service: SegmentService = Depends(get_segment_service),
) -> RouteService:
    return RouteService(network, segment_service=segment_service)
