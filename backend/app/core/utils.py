"""
Utility functions for the application.
"""
from typing import Any, Dict


def format_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    return {
        "message": message,
        "data": data
    }


def format_error(message: str, details: Any = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": message}
    if details:
        response["details"] = details
    return response


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty once stripped."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def supplied_fields(data: Any, nullable: tuple = ()) -> Dict[str, Any]:
    """
    Fields the caller actually sent on a partial-update schema.

    Explicit nulls are dropped unless the field is listed in `nullable`,
    so required columns keep their previous value.
    """
    fields = data.model_dump(exclude_unset=True)
    return {
        key: value for key, value in fields.items()
        if value is not None or key in nullable
    }
