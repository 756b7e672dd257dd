import logging
from typing import Optional
from fastapi import HTTPException

from blitz_backend.core.errors import BlitzError

logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error handling for the application."""

    @staticmethod
    def handle_api_error(operation: str, error: Exception, bot_name: Optional[str] = None) -> HTTPException:
        error_msg = f"Error during {operation}"
        if bot_name:
            error_msg += f" for bot {bot_name}"

        if isinstance(error, BlitzError):
            if error.status_code >= 500:
                logger.error(f"{error_msg}: {error.message}")
            else:
                logger.info(f"{error_msg}: {error.message}")
            return HTTPException(status_code=error.status_code, detail=error.to_dict())

        logger.error(f"{error_msg}: {str(error)}")
        return HTTPException(
            status_code=500,
            detail={"error": f"Failed to {operation}", "kind": "internal_error"}
        )
