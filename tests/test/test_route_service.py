"""
RouteService 테스트
"""

import pytest
from unittest.mock import MagicMock

from metro_segment.core.exceptions import InvalidItineraryException
from metro_segment.models.domain import ItinerarySegment
from metro_segment.services.route_service import RouteService


class TestRouteService:
    """RouteService 테스트 클래스"""

    def test_line_tag_belongs_to_upcoming_segment(self, network):
        """A(l1) B(l2) C => (A,B,l1), (B,C,l2)"""
        service = RouteService(network)

        segments = service.build_segments(["A(l1)", "B(l2)", "C"])

        assert segments == [
            ItinerarySegment("A", "B", "l1"),
            ItinerarySegment("B", "C", "l2"),
        ]

    def test_segment_service_called_per_pair(self, network):
        mock_segment = MagicMock()
        mock_segment.calculate_segment.side_effect = ["first", "second"]
        service = RouteService(network, segment_service=mock_segment)

        report = service.calculate_route(["A(l1)", "B(l2)", "C"])

        assert report == "first, second"
        calls = [c.args for c in mock_segment.calculate_segment.call_args_list]
        assert calls == [("A", "B", "l1"), ("B", "C", "l2")]

    def test_full_route(self, route_service):
        """계양역(arex) 김포공항역(9) 노량진역"""
        report = route_service.calculate_route(["계양역(arex)", "김포공항역(9)", "노량진역"])

        first, second = report.split(", 18.4km")
        assert first == "6.6km(7분, 계양역-김포공항역, 직선 5.8km)"
        assert second == "(23분, 김포공항역-노량진역, 직선 13.5km)"

    def test_failed_segment_does_not_stop_route(self, route_service):
        """중간 구간 실패 시에도 이후 구간 계산"""
        report = route_service.calculate_route(["계양역(99)", "김포공항역(9)", "당산"])

        assert report.startswith("Error: 존재하지 않는 노선(99), ")
        assert report.endswith("12.9km(16분, 김포공항역-당산)")

    def test_last_token_line_tag_ignored(self, route_service):
        report = route_service.calculate_route(["개화(9)", "당산(arex)"])

        assert report == "16.5km(21분, 개화-당산)"

    def test_missing_line_tag(self, route_service):
        """노선 없이 시작하면 빈 노선으로 에러"""
        report = route_service.calculate_route(["계양역", "마곡나루역"])

        assert report == "Error: 존재하지 않는 노선()"

    def test_requires_two_tokens(self, route_service):
        with pytest.raises(InvalidItineraryException):
            route_service.calculate_route(["계양역(arex)"])

        with pytest.raises(InvalidItineraryException):
            route_service.build_segments([])

    def test_custom_delimiter(self, network):
        service = RouteService(network, delimiter=" | ")

        report = service.calculate_route(["개화(9)", "당산(9)", "노량진역"])

        assert report == "16.5km(21분, 개화-당산) | 5.5km(7분, 당산-노량진역)"

    def test_route_report(self, route_service):
        report = route_service.calculate_route_report(
            ["계양역(arex)", "마곡나루역(99)", "노량진역"]
        )

        assert report.stops == ["계양역(arex)", "마곡나루역(99)", "노량진역"]
        assert len(report.segments) == 2

        ok, failed = report.segments
        assert ok.result is not None
        assert ok.result.time_minutes == 10
        assert ok.error_code is None
        assert failed.result is None
        assert failed.error_code == "LINE_NOT_FOUND"
        assert report.report == f"{ok.text}, {failed.text}"

    def test_route_report_matches_plain_route(self, route_service):
        tokens = ["계양역(arex)", "김포공항역(9)", "노량진역"]

        assert (
            route_service.calculate_route_report(tokens).report
            == route_service.calculate_route(tokens)
        )
