"""Testing utilities for slack-paste."""

from __future__ import annotations

from slack_paste.testing.recording import RecordingChatClient, SentMessage

__all__ = ["RecordingChatClient", "SentMessage"]
