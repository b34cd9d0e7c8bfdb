"""Error taxonomy for slack-paste.

Every failure the CLI can report is a :class:`SlackPasteError`.  Errors
propagate unmodified to the command layer, which prints the message to
stderr and exits non-zero.  Nothing here is retried.
"""

from __future__ import annotations


class SlackPasteError(Exception):
    """Base class for all slack-paste failures."""


class ConfigMissing(SlackPasteError):
    """The config file does not exist or cannot be opened."""


class ConfigMalformed(SlackPasteError):
    """The config file is not a valid credential record."""


class ConfigWriteError(SlackPasteError):
    """The config file or its parent directory could not be written."""


class InputReadError(SlackPasteError):
    """Standard input could not be read."""


class DeliveryError(SlackPasteError):
    """Slack rejected the message or could not be reached.

    ``detail`` holds the error reported by Slack (e.g. ``channel_not_found``)
    or the transport failure message.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to send message: {detail}")
        self.detail = detail


class UsageError(SlackPasteError):
    """Missing or invalid command-line arguments."""
