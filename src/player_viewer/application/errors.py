"""Errors raised while serving player requests, each tied to an HTTP status."""
from __future__ import annotations


class PlayerViewerError(Exception):
    """Base class for failures reported to API callers as ``{"error": ...}``."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ClientInputError(PlayerViewerError):
    """Signal that the request path or body cannot be understood."""

    status_code = 400
    default_message = "Invalid request."


class MissingPathSegmentsError(ClientInputError):
    """Signal that the player route lacks the identifier or subresource."""

    default_message = "Missing UUID or subresource."


class InvalidRequestBodyError(ClientInputError):
    """Signal that a command body is not a valid JSON object."""

    default_message = "Invalid request body."


class NotFoundError(PlayerViewerError):
    """Signal that the addressed resource does not exist."""

    status_code = 404
    default_message = "Not found"


class PlayerNotFoundError(NotFoundError):
    """Signal that no connected player matches the requested identifier."""

    default_message = "Player not found"


class UnknownSubresourceError(NotFoundError):
    """Signal that the requested per-player view or action does not exist."""

    default_message = "Unknown subresource"


class MethodNotAllowedError(PlayerViewerError):
    """Signal that an action subresource was invoked without POST."""

    status_code = 405
    default_message = "Method not allowed"
