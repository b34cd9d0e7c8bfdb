"""slack-paste: pipe standard input into a Slack channel or DM.

Reads everything on stdin, wraps it in a preformatted block, and posts
it with a token stored by ``slack-paste init``.
"""

from __future__ import annotations
