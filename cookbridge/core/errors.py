# cookbridge/core/errors.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import status


class CookBridgeError(Exception):
    """Base error; carries the HTTP status the error handler should answer with."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInput(CookBridgeError):
    status_code = status.HTTP_400_BAD_REQUEST


class RecipeNotFound(CookBridgeError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, recipe_id: int, reason: Optional[str] = None):
        details: Dict[str, Any] = {"recipeId": recipe_id}
        if reason:
            details["reason"] = reason
        super().__init__(f"Recipe with ID {recipe_id} not found", details)
        self.recipe_id = recipe_id


class UpstreamUnavailable(CookBridgeError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    def __init__(self, reason: str, recipe_id: Optional[int] = None):
        details: Dict[str, Any] = {"reason": reason}
        if recipe_id is not None:
            details["recipeId"] = recipe_id
        message = "External service unavailable"
        if recipe_id is not None:
            message = f"{message} while fetching recipe {recipe_id}"
        super().__init__(message, details)
        self.recipe_id = recipe_id


def error_payload(message: str, status_code: int, details: Any = None) -> Dict[str, Any]:
    return {
        "success": False,
        "error": {
            "message": message,
            "statusCode": status_code,
            "details": details,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    }
