"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from diagonal_advisor import __version__
from diagonal_advisor.api.routes import router
from diagonal_advisor.config import Settings, get_settings
from diagonal_advisor.providers import ProviderError, ProviderNotImplementedError
from diagonal_advisor.service.advisor import AdvisorService

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app. Each request evaluates its own snapshot; no shared state beyond config."""
    app = FastAPI(
        title="Diagonal Advisor",
        description="Strategy decision calculator for diagonals, PMCCs and bear call spreads",
        version=__version__,
    )
    app.state.advisor = AdvisorService(settings=settings)
    app.include_router(router)

    @app.exception_handler(ProviderNotImplementedError)
    async def provider_not_implemented(request: Request, exc: ProviderNotImplementedError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_501_NOT_IMPLEMENTED,
            content={"ok": False, "provider": exc.provider, "message": exc.message},
        )

    @app.exception_handler(ProviderError)
    async def provider_failed(request: Request, exc: ProviderError) -> JSONResponse:
        logger.error("Provider %s failed: %s", exc.provider, exc.message)
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"ok": False, "provider": exc.provider, "message": exc.message},
        )

    @app.get("/health", tags=["health"], summary="Health check")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


def main() -> None:
    import uvicorn

    cfg = get_settings().api
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("Starting Diagonal Advisor API on %s:%d", cfg.host, cfg.port)
    uvicorn.run("diagonal_advisor.api.app:create_app", factory=True, host=cfg.host, port=cfg.port)


if __name__ == "__main__":
    main()
