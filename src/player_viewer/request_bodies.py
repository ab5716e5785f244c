"""Typed JSON bodies accepted by the player action endpoints."""
from __future__ import annotations

from typing import Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from player_viewer.application.errors import InvalidRequestBodyError


class KickRequest(BaseModel):
    """Body of ``POST /players/{id}/kick``; ``reason`` defaults server-side."""

    model_config = ConfigDict(extra="ignore")

    reason: Optional[str] = None


class MessageRequest(BaseModel):
    """Body of ``POST /players/{id}/message``; ``message`` defaults to ``""``."""

    model_config = ConfigDict(extra="ignore")

    message: Optional[str] = None


_BodyT = TypeVar("_BodyT", bound=BaseModel)


def decode_body(raw_body: bytes, model: Type[_BodyT]) -> _BodyT:
    """Validate ``raw_body`` against ``model``; an empty body means ``{}``."""

    if not raw_body.strip():
        return model()
    try:
        return model.model_validate_json(raw_body)
    except ValidationError as error:
        raise InvalidRequestBodyError() from error
