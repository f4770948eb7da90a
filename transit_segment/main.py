"""
Transit Segment - FastAPI Application

지하철 구간별 선로 거리, 직선 거리, 예상 소요시간 조회 API
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from transit_segment.core.config import settings
from transit_segment.core.exceptions import TransitSegmentException
from transit_segment.api.v1.router import api_router
from transit_segment.models.responses import ErrorResponse
from transit_segment.services.transit_network import get_transit_network

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 노선망을 한 번 로드하고, 이후에는 읽기 전용으로 공유
    """
    logger.info(f"{settings.PROJECT_NAME} 시작 중...")
    network = get_transit_network()
    logger.info(f"노선망 준비 완료: {', '.join(network.line_ids)}")

    yield

    logger.info(f"{settings.PROJECT_NAME} 종료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="지하철 구간 거리 및 소요시간 계산",
    lifespan=lifespan,
)

# API 라우터 등록
app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """헬스 체크 엔드포인트"""
    network = get_transit_network()
    return {
        "status": "healthy" if network.lines else "unhealthy",
        "version": settings.VERSION,
        "lines": len(network.lines),
    }


# ========== Exception Handlers ==========


@app.exception_handler(TransitSegmentException)
async def transit_segment_exception_handler(request, exc: TransitSegmentException):
    logger.warning(f"요청 처리 실패: [{exc.code}] {exc.message}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(error=exc.message, code=exc.code).model_dump(),
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "transit_segment.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
    )
