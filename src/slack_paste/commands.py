"""The ``init`` and ``paste`` flows.

Both are plain functions with their terminal and network collaborators
passed in, so the CLI wrapper in :mod:`slack_paste.__main__` stays thin
and tests can drive the flows without a terminal or Slack.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from slack_paste.client import ChatClient
from slack_paste.config import ensure_parent, load, save
from slack_paste.errors import InputReadError, UsageError
from slack_paste.models import Credential
from slack_paste.render import render

logger = logging.getLogger(__name__)

TOKEN_PROMPT = "Please input the slack token"

Prompt = Callable[[str], str]
"""Asks the user a question and returns the line they typed."""


def run_init(config_path: Path, prompt: Prompt) -> Path:
    """Prompt for a token and store it at *config_path*.

    Returns the path written.
    """
    ensure_parent(config_path)
    token = prompt(TOKEN_PROMPT)
    if not token:
        raise UsageError("The slack token must not be empty")
    save(config_path, Credential(slack_token=token))
    return config_path


def read_input(stream: TextIO) -> str:
    """Drain *stream* completely."""
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(f"Failed to read standard input: {exc}") from exc


def run_paste(
    config_path: Path,
    destination: str,
    stdin: TextIO,
    client: ChatClient,
) -> None:
    """Post everything on *stdin* to *destination*.

    The credential is loaded before stdin is touched, and stdin is fully
    drained before any network call.  Either one message is sent or
    an error is raised.
    """
    if not destination.strip():
        raise UsageError("DESTINATION must not be empty")
    credential = load(config_path)
    text = read_input(stdin)
    logger.debug("Read %d chars from stdin", len(text))
    content = render(text)
    session = client.authenticate(credential)
    client.send(session, destination, content)
