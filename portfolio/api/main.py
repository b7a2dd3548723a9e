import os
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from prometheus_fastapi_instrumentator import Instrumentator
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.api.exceptions import PortfolioException
from portfolio.api.logging_config import logger
from portfolio.api.routes import pages, projects
from portfolio.config import config

PACKAGE_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
STATIC_DIR = os.path.join(PACKAGE_ROOT, "static")


def problem_response(
    request: Request, status_code: int, title: str, type_slug: str, detail, code: str, headers=None
):
    return JSONResponse(
        status_code=status_code,
        content={
            "type": f"https://portfolio.local/errors/{type_slug}",
            "title": title,
            "status": status_code,
            "detail": detail,
            "instance": str(request.url),
            "code": code,
            "extensions": {
                "timestamp": datetime.utcnow().isoformat() + "Z"
            }
        },
        headers=headers,
    )


async def portfolio_exception_handler(request: Request, exc: PortfolioException):
    error_code = exc.__class__.__name__.replace("Error", "").upper()
    if error_code == "PORTFOLIOEXCEPTION":
        error_code = "INTERNAL_ERROR"

    return problem_response(
        request,
        exc.status_code,
        exc.__class__.__name__,
        exc.__class__.__name__.lower(),
        exc.detail,
        error_code,
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return problem_response(
        request,
        exc.status_code,
        "HTTP Exception",
        "http-exception",
        exc.detail,
        f"HTTP_{exc.status_code}",
        headers=getattr(exc, "headers", None),
    )


# 스태틱 파일 서빙 (캐시 헤더 포함)
class CacheStaticFiles(StaticFiles):
    async def get_response(self, path: str, scope):
        response = await super().get_response(path, scope)
        response.headers["Cache-Control"] = "public, max-age=3600"
        return response


def allowed_origins():
    allowed_origins_raw = os.getenv("ALLOWED_ORIGINS")
    if allowed_origins_raw:
        return [origin.strip() for origin in allowed_origins_raw.split(",") if origin.strip()]
    return list(config.get("cors", "allowed_origins", []))


def create_app() -> FastAPI:
    app = FastAPI(
        title="Infinite Portfolio API",
        description="Infinite Portfolio - canvas portfolio page and project listing API",
        version="0.1.0",
    )

    # Gzip 압축 미들웨어 추가
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Prometheus 모니터링 초기화 (테스트 환경 제외)
    if os.getenv("APP_ENV") != "test":
        Instrumentator().instrument(app).expose(app)
        logger.info("Prometheus Instrumentator initialized")

    app.add_exception_handler(PortfolioException, portfolio_exception_handler)
    # 404/405 같은 라우팅 에러도 StarletteHTTPException으로 올라옴
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)

    # 라우터 포함
    app.include_router(pages.router, tags=["pages"])  # /
    app.include_router(projects.router, prefix="/api/projects", tags=["projects"])

    app.mount("/static", CacheStaticFiles(directory=STATIC_DIR), name="static")

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # HTTPS 리다이렉트 미들웨어 (프로덕션 환경 전용)
    @app.middleware("http")
    async def enforce_https_redirect(request: Request, call_next):
        if os.getenv("APP_ENV", "development") == "production":
            # 클라우드 공급자는 보통 X-Forwarded-Proto 헤더를 사용함
            if request.headers.get("x-forwarded-proto") != "https":
                url = request.url.replace(scheme="https")
                return RedirectResponse(url, status_code=status.HTTP_301_MOVED_PERMANENTLY)
        return await call_next(request)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info(f"Request: {request.method} {request.url}")
        response = await call_next(request)
        logger.info(f"Response: {response.status_code}")
        return response

    @app.on_event("startup")
    async def startup():
        host = config.get("server", "host")
        port = config.get("server", "port")
        logger.info("Portfolio application started")
        logger.info(f"Open browser at: http://{host}:{port}")
        logger.info(f"API endpoint: http://{host}:{port}/api/projects")

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
