import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Metro Segment Calculator")
    VERSION: str = os.getenv("VERSION", "1.0.0")

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # 역간거리 CSV (철도운영기관명, 선명, 역명, 역간거리)
    STATION_DATA_PATH: str = os.getenv(
        "STATION_DATA_PATH", "국가철도공단_서울교통공사 역간거리_20231231.csv"
    )
    CSV_ENCODING: str = os.getenv("CSV_ENCODING", "utf-8-sig")

    # 노선 표정속도 기본값 (km/h)
    DEFAULT_LINE_SPEED: float = float(os.getenv("DEFAULT_LINE_SPEED", 40.0))

    # 지구 반지름 (km)
    EARTH_RADIUS_KM: float = float(os.getenv("EARTH_RADIUS_KM", 6371.0))

    # 위도 0을 "좌표 없음"으로 취급 (적도와 구분 불가, 알려진 근사)
    ZERO_LATITUDE_IS_MISSING: bool = (
        os.getenv("ZERO_LATITUDE_IS_MISSING", "true").lower() == "true"
    )

    # 구간 결과 구분자
    SEGMENT_DELIMITER: str = os.getenv("SEGMENT_DELIMITER", ", ")


settings = Settings()  # 모듈화
