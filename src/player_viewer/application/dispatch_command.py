"""Use case applying administrative commands to connected players."""
from __future__ import annotations

import logging

from player_viewer.domain.models.admin_command import (
    AdminCommand,
    CommandOutcome,
    KickCommand,
    MessageCommand,
)
from player_viewer.domain.repositories.game_host import PlayerHandle

logger = logging.getLogger(__name__)

DEFAULT_KICK_REASON = "Kicked by admin"


class CommandDispatcher:
    """Forward kick and message actions to the host.

    Commands are fire-and-forget: the host performs the disconnect or chat
    delivery on its own schedule, and repeated calls are not deduplicated.
    """

    def __init__(self, default_kick_reason: str = DEFAULT_KICK_REASON) -> None:
        """Initialize the dispatcher with the reason used for bare kicks."""

        self._default_kick_reason = default_kick_reason

    def kick(self, handle: PlayerHandle, reason: str | None = None) -> CommandOutcome:
        """Disconnect ``handle`` with ``reason`` or the default reason."""

        return self.apply(
            handle,
            KickCommand(reason=self._default_kick_reason if reason is None else reason),
        )

    def message(self, handle: PlayerHandle, text: str | None = None) -> CommandOutcome:
        """Send ``text`` to ``handle``, an empty message when absent."""

        return self.apply(handle, MessageCommand(text="" if text is None else text))

    def apply(self, handle: PlayerHandle, command: AdminCommand) -> CommandOutcome:
        """Execute ``command`` against ``handle``."""

        if isinstance(command, KickCommand):
            handle.disconnect(command.reason)
            logger.info("Kicked player %s: %s", handle.uuid, command.reason)
        elif isinstance(command, MessageCommand):
            handle.send_message(command.text)
            logger.info("Sent message to player %s", handle.uuid)
        else:
            raise TypeError(f"Unsupported admin command: {command!r}")
        return CommandOutcome(success=True)
