# blitz_backend/routes/bots.py
from fastapi import APIRouter, Depends

from blitz_backend.core.errors import BlitzError
from blitz_backend.models.bot import BotView, CreateBotRequest
from blitz_backend.routes.deps import get_bot_manager
from blitz_backend.services.bot_manager import BotManager
from utils import ErrorHandler

router = APIRouter()


@router.get("/directories")
def list_directories(bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        return {"directories": bot_manager.list_bots()}
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("read directory", e)


@router.post("/create")
def create_bot(body: CreateBotRequest, bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        folder = bot_manager.create_bot(body.name, body.token)
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("create bot folder", e, body.name)

    return {
        "message": f'Bot folder for "{body.name}" created successfully.',
        "folder": str(folder),
    }


@router.get("/app/{name}", response_model=BotView)
def get_bot(name: str, bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        return bot_manager.inspect_bot(name)
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("retrieve bot information", e, name)


@router.delete("/delete/{name}")
def delete_bot(name: str, bot_manager: BotManager = Depends(get_bot_manager)):
    try:
        bot_manager.delete_bot(name)
    except BlitzError as e:
        raise ErrorHandler.handle_api_error("delete bot", e, name)

    return {"message": f'Bot "{name}" deleted successfully.'}
