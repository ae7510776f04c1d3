import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import favorites, jokes, lifecycle
from app.services.joke_fetcher import JokeFetcher
from app.services.persistence import FavoritesGateway
from app.services.session import SessionController

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_controller() -> SessionController:
    return SessionController(
        fetcher=JokeFetcher(url=settings.joke_api_url, user_agent=settings.user_agent),
        gateway=FavoritesGateway(settings.favorites_path),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.controller is None:
        app.state.controller = build_controller()
    controller: SessionController = app.state.controller

    await controller.start()
    yield

    logger.info("Shutting down %s", settings.app_name)
    # Unchanged favorites stay as they are on disk, even if they failed to load
    if controller.has_unsaved_changes:
        controller.save_favorites()
    await controller.aclose()


def create_app(controller: Optional[SessionController] = None) -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.controller = controller

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(jokes.router)
    app.include_router(favorites.router)
    app.include_router(lifecycle.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()
