"""Chat client protocol and the Slack Web API implementation.

The command layer talks to Slack only through :class:`ChatClient`: one
call to bind a credential to a session, one call to post a message.
:mod:`slack_paste.testing` provides a recording substitute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from slack_paste.errors import DeliveryError
from slack_paste.models import Credential, MessageContent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """A credential bound to an API handle for a single invocation."""

    credential: Credential
    api: WebClient | None = None


class ChatClient(Protocol):
    """Interface between the CLI and the chat service."""

    def authenticate(self, credential: Credential) -> Session: ...

    def send(
        self, session: Session, destination: str, content: MessageContent
    ) -> None: ...


def _api_error_detail(exc: SlackApiError) -> str:
    """Pull Slack's ``error`` code out of a failed API response."""
    response = exc.response
    error = response.get("error") if response is not None else None
    return str(error) if error else str(exc)


class SlackChatClient:
    """:class:`ChatClient` backed by :class:`slack_sdk.WebClient`.

    Retry handlers are disabled: each ``send`` is exactly one HTTP
    request, and the caller decides whether to try again.
    """

    def __init__(self, base_url: str = WebClient.BASE_URL) -> None:
        self._base_url = base_url

    def authenticate(self, credential: Credential) -> Session:
        api = WebClient(
            token=credential.slack_token,
            base_url=self._base_url,
            retry_handlers=[],
        )
        return Session(credential=credential, api=api)

    def send(
        self, session: Session, destination: str, content: MessageContent
    ) -> None:
        if session.api is None:
            raise DeliveryError("session is not bound to a Slack client")
        logger.debug("Posting %d chars to %s", len(content.text), destination)
        try:
            session.api.chat_postMessage(
                channel=destination,
                text=content.fallback,
                blocks=list(content.blocks),
            )
        except SlackApiError as exc:
            raise DeliveryError(_api_error_detail(exc)) from exc
        except SlackClientError as exc:
            raise DeliveryError(str(exc)) from exc
        except OSError as exc:
            raise DeliveryError(f"network error: {exc}") from exc
        logger.debug("Posted message to %s", destination)


def create_client() -> ChatClient:
    """Build the client used by ``slack-paste paste``."""
    return SlackChatClient()
