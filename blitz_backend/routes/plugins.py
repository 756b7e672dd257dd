# blitz_backend/routes/plugins.py
from fastapi import APIRouter, Depends

from blitz_backend.core.errors import BlitzError
from blitz_backend.routes.deps import get_bot_manager
from blitz_backend.services.bot_manager import BotManager
from utils import ErrorHandler

router = APIRouter()


@router.post("/add/{app_name}/{plugin_name}")
def add_plugin(app_name: str, plugin_name: str,
               bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        message = bot_manager.install_plugin(app_name, plugin_name)
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("add plugin", e, app_name)

    return {"message": message}
