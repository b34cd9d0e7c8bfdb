"""Data models for slack-paste.

All models are immutable (frozen) pydantic models.  Unlike most CLI
inputs, nothing here strips whitespace: tokens are stored verbatim and
message text must reach Slack byte-for-byte.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Credential(BaseModel):
    """The stored Slack token.

    Unknown keys in the config record are ignored so newer config files
    still load.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    slack_token: str = Field(min_length=1)


class MessageContent(BaseModel):
    """A rendered message, ready for ``chat.postMessage``.

    ``text`` is the captured input exactly as read.  ``blocks`` is the
    Slack Block Kit payload and ``fallback`` the plain notification text
    Slack shows where blocks cannot be displayed.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    blocks: tuple[dict[str, Any], ...]
    fallback: str
