"""Shared pydantic building blocks for the service models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


def _blank_to_none(value: Any) -> Any:
    if value == "":
        return None
    return value


# The control plane sends "" for unset timestamps.
Timestamp = Annotated[datetime | None, BeforeValidator(_blank_to_none)]


class APIModel(BaseModel):
    """Base for every request and response record.

    Fields are snake_case in Python and keep the service's spelling on the wire
    through aliases. Either name is accepted when building a record.
    """

    model_config = ConfigDict(populate_by_name=True)


class IDName(APIModel):
    """Reference to another entity by ID and display name."""

    id: str = ""
    name: str = ""
