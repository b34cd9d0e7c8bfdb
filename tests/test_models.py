"""Tests for slack-paste data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from slack_paste.models import Credential, MessageContent


class TestCredential:
    def test_valid(self) -> None:
        cred = Credential(slack_token="xoxb-123")
        assert cred.slack_token == "xoxb-123"

    def test_empty_token_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Credential(slack_token="")

    def test_whitespace_preserved(self) -> None:
        cred = Credential(slack_token=" xoxb-123 ")
        assert cred.slack_token == " xoxb-123 "

    def test_unknown_keys_ignored(self) -> None:
        cred = Credential.model_validate({"slack_token": "t", "workspace": "acme"})
        assert cred == Credential(slack_token="t")

    def test_immutable(self) -> None:
        cred = Credential(slack_token="t")
        with pytest.raises(ValidationError):
            cred.slack_token = "other"  # type: ignore[misc]


class TestMessageContent:
    def test_text_not_stripped(self) -> None:
        content = MessageContent(text="  indented\n", blocks=(), fallback="")
        assert content.text == "  indented\n"
