# blitz_backend/models/bot.py
from typing import Any, Dict, List, Optional
from pydantic import BaseModel


class CreateBotRequest(BaseModel):
    name: Optional[str] = None
    token: Optional[str] = None


class BotView(BaseModel):
    """Read-only composite view of a bot on disk."""
    name: str
    directory: str
    manifest: Optional[Dict[str, Any]] = None
    plugins: List[str] = []
    config: Dict[str, Any]
