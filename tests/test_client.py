"""Tests for the Slack chat client adapter."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from slack_sdk.errors import SlackApiError, SlackRequestError

from slack_paste.client import Session, SlackChatClient, create_client
from slack_paste.errors import DeliveryError
from slack_paste.models import Credential
from slack_paste.render import render

_CRED = Credential(slack_token="xoxb-test")


def _api_error(error: str) -> SlackApiError:
    response = MagicMock()
    response.get.side_effect = {"ok": False, "error": error}.get
    return SlackApiError(f"The request to the Slack API failed. ({error})", response)


class TestAuthenticate:
    def test_binds_token(self) -> None:
        session = SlackChatClient().authenticate(_CRED)
        assert session.credential == _CRED
        assert session.api is not None
        assert session.api.token == "xoxb-test"

    def test_disables_retries(self) -> None:
        session = SlackChatClient().authenticate(_CRED)
        assert session.api is not None
        assert session.api.retry_handlers == []

    def test_custom_base_url(self) -> None:
        session = SlackChatClient(base_url="http://localhost:8888/").authenticate(
            _CRED
        )
        assert session.api is not None
        assert session.api.base_url == "http://localhost:8888/"

    def test_no_network_call(self) -> None:
        with patch("slack_paste.client.WebClient") as mock_web:
            SlackChatClient().authenticate(_CRED)
        mock_web.return_value.api_call.assert_not_called()
        mock_web.return_value.chat_postMessage.assert_not_called()


class TestSend:
    def test_posts_once(self) -> None:
        api = MagicMock()
        content = render("hello\nworld")
        SlackChatClient().send(Session(_CRED, api), "#general", content)
        api.chat_postMessage.assert_called_once_with(
            channel="#general",
            text="hello\nworld",
            blocks=list(content.blocks),
        )

    def test_api_error_carries_detail(self) -> None:
        api = MagicMock()
        api.chat_postMessage.side_effect = _api_error("channel_not_found")
        with pytest.raises(DeliveryError, match="channel_not_found") as info:
            SlackChatClient().send(Session(_CRED, api), "#nope", render("x"))
        assert info.value.detail == "channel_not_found"
        assert api.chat_postMessage.call_count == 1

    def test_client_error(self) -> None:
        api = MagicMock()
        api.chat_postMessage.side_effect = SlackRequestError("bad request")
        with pytest.raises(DeliveryError, match="bad request"):
            SlackChatClient().send(Session(_CRED, api), "#general", render("x"))

    def test_network_error(self) -> None:
        api = MagicMock()
        api.chat_postMessage.side_effect = ConnectionRefusedError("refused")
        with pytest.raises(DeliveryError, match="network error: refused"):
            SlackChatClient().send(Session(_CRED, api), "#general", render("x"))
        assert api.chat_postMessage.call_count == 1

    def test_unbound_session(self) -> None:
        with pytest.raises(DeliveryError, match="not bound"):
            SlackChatClient().send(Session(_CRED), "#general", render("x"))


class TestCreateClient:
    def test_returns_slack_client(self) -> None:
        assert isinstance(create_client(), SlackChatClient)
