from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dotenv import load_dotenv

from persistence import AsyncDiskSaveRepository, DiskSaveStore
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    # Raising here aborts startup: no request can be served without a writable store.
    app.state.store.ensure_ready()
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    if settings is None:
        load_dotenv("local.env")
        settings = get_settings()

    from endpoints.game_endpoints import router as game_router

    store = DiskSaveStore(settings.save_dir, serialize_writes=settings.serialize_writes)

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.save_repo = AsyncDiskSaveRepository(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
            return response

    @app.get("/api/ping")
    async def ping():
        return JSONResponse({"status": "ok"})

    app.include_router(game_router)

    return app


app = create_app()


if __name__ == "__main__":
    # Convenience: python app.py
    import uvicorn

    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server running on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, reload=False)
