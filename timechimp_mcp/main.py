import httpx
import structlog
from fastapi import FastAPI

from .config import Settings, load_settings
from .dispatcher import Dispatcher
from .logging_config import configure_logging
from .routes import router
from .timechimp import TimechimpClient

log = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    settings = settings or load_settings()
    app = FastAPI(title="TimeChimp MCP")
    app.state.settings = settings
    app.state.dispatcher = Dispatcher(TimechimpClient(settings, transport=transport))
    app.include_router(router)
    return app


def run() -> None:
    import uvicorn

    settings = load_settings()
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    if not settings.api_key:
        log.warning("TIMECHIMP_API_KEY not set; every tool call will fail until it is")
    log.info("starting", host=settings.host, port=settings.port, base_url=settings.base_url)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
