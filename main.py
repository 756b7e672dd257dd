import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blitz_backend.core.config import Settings, settings as default_settings
from blitz_backend.routes import base, bots, config, plugins
from blitz_backend.services.bot_manager import BotManager

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def create_app(settings: Optional[Settings] = None,
               bot_manager: Optional[BotManager] = None) -> FastAPI:
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.bot_manager.workspace.ensure()
        logger.info(
            f"Serving bots from {app.state.bot_manager.workspace.path}")
        yield

    app = FastAPI(
        title="Blitz Bot Builder",
        description="API for creating bot workspaces and installing plugins into them",
        lifespan=lifespan,
    )
    app.state.bot_manager = bot_manager or BotManager.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(base.router)
    app.include_router(bots.router)
    app.include_router(plugins.router, prefix="/plugin")
    app.include_router(config.router, prefix="/config")
    return app


configure_logging(default_settings.LOG_LEVEL)
app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=default_settings.HOST, port=default_settings.PORT)
