from __future__ import annotations

import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.api.health import router as health_router
from app.api.sitemap import router as sitemap_router
from app.api.v1 import api_router
from common.logger import setup_logger
from common.middleware.request_trace import RequestTraceMiddleware
from common.mongo.client import close_client
from common.sql.database import dispose_engine


@asynccontextmanager
async def lifespan(app: FastAPI):  # pragma: no cover - framework hook
    """저장소 연결은 첫 요청에서 지연 생성되므로 종료 시 정리만 한다."""

    try:
        yield
    finally:
        close_client()
        dispose_engine()


def create_app() -> FastAPI:
    logger = setup_logger(name="portfolio-service")
    app = FastAPI(
        title="Portfolio Service",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_middleware(RequestTraceMiddleware, logger=logger)

    app.include_router(health_router, tags=["health"])
    app.include_router(sitemap_router, tags=["sitemap"])
    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


def main() -> None:
    """명령행에서 실행할 수 있도록 uvicorn 런처를 제공한다."""

    import uvicorn

    port = int(os.getenv("PORTFOLIO_SERVICE_PORT", "8000"))
    uvicorn.run("app.main:app", host="0.0.0.0", port=port, reload=False)


if __name__ == "__main__":  # pragma: no cover - CLI entrypoint
    main()
