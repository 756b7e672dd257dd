# blitz_backend/routes/deps.py
from fastapi import Request

from blitz_backend.services.bot_manager import BotManager


def get_bot_manager(request: Request) -> BotManager:
    return request.app.state.bot_manager
