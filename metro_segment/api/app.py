"""
Metro Segment - FastAPI Application

노선별 구간 거리, 소요 시간, 직선 거리 계산 API
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from metro_segment.core.config import settings
from metro_segment.core.exceptions import MetroSegmentException
from metro_segment.models.responses import ErrorResponse
from metro_segment.db.cache import get_network, initialize_network
from metro_segment.api.v1.router import api_router

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    시작 시 노선망을 한 번 구축 (CSV 또는 내장 데이터)
    """
    logger.info("=" * 60)
    logger.info(f"{settings.PROJECT_NAME} 시작 중...")
    logger.info("=" * 60)

    try:
        initialize_network()
    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    yield

    logger.info(f"{settings.PROJECT_NAME} 종료")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 노선별 구간 계산

    - 🚇 선로 거리 (누적 거리 차)
    - ⏱ 소요 시간 (거리 / 표정속도)
    - 📍 직선 거리 (하버사인)
    """,
    lifespan=lifespan,
)

app.include_router(api_router, prefix="/v1")


@app.get("/")
async def root():
    """서비스 기본 정보 반환"""
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """헬스 체크: 노선망 로드 상태"""
    try:
        network = get_network()
        return {"status": "healthy", "lines": len(network)}
    except Exception as e:
        logger.error(f"헬스 체크 실패: {e}")
        return {"status": "unhealthy", "error": str(e)}


# 에러 코드별 HTTP 상태
ERROR_STATUS_CODES = {
    "LINE_NOT_FOUND": 404,
    "STATION_NOT_FOUND": 404,
    "INVALID_ITINERARY": 400,
    "INVALID_DISTANCE": 422,
}


@app.exception_handler(MetroSegmentException)
async def metro_segment_exception_handler(request, exc: MetroSegmentException):
    """
    도메인 예외 핸들러

    ErrorResponse 형태 ({"error", "code"})로 응답
    """
    status_code = ERROR_STATUS_CODES.get(exc.code, 500)
    logger.info(f"요청 실패: {request.url.path} {exc.code} {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=exc.message, code=exc.code).model_dump(),
    )


if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "metro_segment.api.app:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
