"""Shared field types for request bodies."""

from typing import Annotated, Any

from pydantic import BeforeValidator


def _scalar_to_str(value: Any) -> Any:
    """JSON numbers are accepted where text is expected and stored as text."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


# Text field that takes whatever scalar the client sends
LaxStr = Annotated[str | None, BeforeValidator(_scalar_to_str)]
