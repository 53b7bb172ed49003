from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .routes import design
from .config import settings
from .utils.logger import logger

logger.info(f"Starting {settings.app_name} v{settings.app_version}")

# FastAPI 앱 생성
app = FastAPI(
    title=settings.app_name,
    description="방 사진 리모델링 / 가상 스테이징 이미지 생성 API",
    version=settings.app_version,
    debug=settings.debug
)

# CORS 설정 (환경변수 기반)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

logger.info(f"CORS enabled for origins: {settings.cors_origins}")

# 라우터 등록
app.include_router(design.router)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """요청 형식 오류도 {success: false, error} 로 응답"""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"Invalid request: {location}: {first.get('msg')}" if location else f"Invalid request: {first.get('msg')}"
    else:
        message = "Invalid request"
    logger.warning(f"Rejected request to {request.url.path}: {message}")
    return JSONResponse(status_code=400, content={"success": False, "error": message})


@app.get("/health")
async def health_check():
    """헬스 체크 및 시스템 상태"""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "stability_api_key_configured": bool(settings.stability_api_key),
        "config": {
            "engine_id": settings.stability_engine_id,
            "timeout_seconds": settings.stability_timeout_seconds
        }
    }


@app.on_event("startup")
async def startup_event():
    """애플리케이션 시작 시 실행"""
    logger.info("="*50)
    logger.info("Application startup")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"Stability API configured: {bool(settings.stability_api_key)}")
    logger.info(f"Stability engine: {settings.stability_engine_id}")
    logger.info("="*50)


@app.on_event("shutdown")
async def shutdown_event():
    """애플리케이션 종료 시 실행"""
    logger.info("Application shutdown")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower()
    )
