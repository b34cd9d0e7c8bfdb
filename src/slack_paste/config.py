"""Credential storage.

The token lives in a single TOML file, by default under the per-user
application directory::

    ~/.config/slack-paste/config.toml       # Linux
    ~/Library/Application Support/slack-paste/config.toml  # macOS

File format::

    slack_token = "xoxb-..."

Only ``slack_token`` is recognized; other keys are ignored on read.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError

from slack_paste.errors import ConfigMalformed, ConfigMissing, ConfigWriteError
from slack_paste.models import Credential

logger = logging.getLogger(__name__)

APP_NAME = "slack-paste"
CONFIG_FILENAME = "config.toml"
CONFIG_ENVVAR = "SLACK_PASTE_CONFIG"


def default_config_path() -> Path:
    """Resolve ``{app_dir}/config.toml`` for the current user."""
    return Path(typer.get_app_dir(APP_NAME)) / CONFIG_FILENAME


def atomic_write(path: Path, content: str) -> None:
    """Atomically write *content* to *path* using temp-file-then-replace.

    Creates parent directories if needed. On failure, the temp file
    is cleaned up and the original file is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(f".{path.name}.tmp")
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def ensure_parent(path: Path) -> None:
    """Create the directory that will hold *path*."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigWriteError(
            f"Cannot create config directory {path.parent}: {exc}"
        ) from exc


def dump_credential(credential: Credential) -> str:
    """Serialize *credential* as a one-key TOML document."""
    # A JSON string literal is a valid TOML basic string once DEL, which
    # TOML forbids raw, is escaped. Non-ASCII stays raw: TOML rejects the
    # surrogate-pair escapes json would emit for astral characters.
    quoted = json.dumps(credential.slack_token, ensure_ascii=False)
    quoted = quoted.replace("\x7f", "\\u007f")
    return f"slack_token = {quoted}\n"


def parse_credential(text: str, *, source: Path | None = None) -> Credential:
    """Parse TOML *text* into a :class:`Credential`."""
    where = f" in {source}" if source is not None else ""
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigMalformed(f"Invalid TOML{where}: {exc}") from exc
    try:
        return Credential.model_validate(raw)
    except ValidationError as exc:
        raise ConfigMalformed(
            f"Expected a non-empty 'slack_token' string{where}.\n"
            "Run 'slack-paste init' to rewrite the config."
        ) from exc


def load(path: Path) -> Credential:
    """Read the credential stored at *path*.

    Raises :class:`ConfigMissing` if the file cannot be opened and
    :class:`ConfigMalformed` if it does not hold a valid record.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ConfigMissing(
            f"Cannot read config file {path}: {exc.strerror or exc}\n"
            "Run 'slack-paste init' first."
        ) from exc
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigMalformed(f"Config file {path} is not valid UTF-8") from exc
    credential = parse_credential(text, source=path)
    logger.debug("Loaded credential from %s", path)
    return credential


def save(path: Path, credential: Credential) -> None:
    """Write *credential* to *path*, replacing any existing file."""
    try:
        atomic_write(path, dump_credential(credential))
    except OSError as exc:
        raise ConfigWriteError(f"Cannot write config file {path}: {exc}") from exc
    logger.debug("Saved credential to %s", path)
