# blitz_backend/routes/config.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from blitz_backend.core.errors import BlitzError
from blitz_backend.routes.deps import get_bot_manager
from blitz_backend.services.bot_manager import BotManager
from utils import ErrorHandler

router = APIRouter()


@router.patch("/update/{name}")
def update_config(name: str, patch: Dict[str, Any] = Body(...),
                  bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        updated = bot_manager.update_config(name, patch)
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("update config", e, name)

    return {
        "message": f'Config for bot "{name}" updated successfully.',
        "updatedConfig": updated,
    }
