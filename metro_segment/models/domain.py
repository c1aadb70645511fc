from typing import List, Optional
from dataclasses import dataclass, field

# domain 정의


@dataclass
class Station:
    name: str  # 노선 내에서 유일
    track_distance: float  # 노선 기점으로부터의 누적 거리 (km)
    lat: Optional[float] = None  # 좌표 없음 => None (0.0과 구분)
    lng: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None


@dataclass
class Line:
    line_id: str
    name: str
    avg_speed: float  # 표정 속도 (km/h)
    stations: List[Station] = field(default_factory=list)

    def add_station(
        self,
        name: str,
        track_distance: float,
        lat: Optional[float] = None,
        lng: Optional[float] = None,
    ) -> Station:
        # 누적 거리 순서 검증은 하지 않음 (호출자 책임)
        station = Station(name, track_distance, lat, lng)
        self.stations.append(station)
        return station

    def find_station(self, name: str) -> Optional[Station]:
        """역 이름으로 역 찾기 (첫 번째 일치)"""
        for station in self.stations:
            if station.name == name:
                return station
        return None

    @property
    def station_names(self) -> List[str]:
        return [s.name for s in self.stations]


@dataclass
class ItineraryStop:
    name: str
    line_id: str = ""  # 다음 구간에서 이용할 노선, 없으면 ""


@dataclass
class ItinerarySegment:
    start_name: str
    end_name: str
    line_id: str
