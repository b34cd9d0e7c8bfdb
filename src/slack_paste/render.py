"""Turn captured text into Slack message content.

The text goes into a single ``section`` block as a triple-backtick
fence, which Slack displays in a monospace box with whitespace and line
breaks preserved and no markdown applied inside.  Slack's mrkdwn
reserves ``&``, ``<`` and ``>``, so those are entity-escaped; Slack
decodes them again when displaying, so the reader sees the original
text.
"""

from __future__ import annotations

import logging

from slack_paste.models import MessageContent

logger = logging.getLogger(__name__)

FENCE = "```"

# Slack rejects section text longer than this with ``invalid_blocks``.
SECTION_TEXT_LIMIT = 3000

# "&" must be escaped first and unescaped last.
_ESCAPES = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))


def escape_mrkdwn(text: str) -> str:
    """Escape Slack's mrkdwn control characters."""
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_mrkdwn(text: str) -> str:
    """Inverse of :func:`escape_mrkdwn`."""
    for char, entity in reversed(_ESCAPES):
        text = text.replace(entity, char)
    return text


def render(text: str) -> MessageContent:
    """Wrap *text* verbatim in one preformatted block.

    Empty text renders as an empty block; it is not an error.  Text is
    never truncated, so a block over :data:`SECTION_TEXT_LIMIT` is only
    logged here and left for Slack to reject.
    """
    escaped = escape_mrkdwn(text)
    fenced = f"{FENCE}{escaped}{FENCE}"
    if len(fenced) > SECTION_TEXT_LIMIT:
        logger.warning(
            "Message is %d chars; Slack accepts at most %d per block",
            len(fenced),
            SECTION_TEXT_LIMIT,
        )
    block = {"type": "section", "text": {"type": "mrkdwn", "text": fenced}}
    return MessageContent(text=text, blocks=(block,), fallback=escaped)


def extract_body(content: MessageContent) -> str:
    """Return the text Slack will display for *content*."""
    (block,) = content.blocks
    fenced: str = block["text"]["text"]
    return unescape_mrkdwn(fenced.removeprefix(FENCE).removesuffix(FENCE))
