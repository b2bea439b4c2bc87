"""Local token storage for `tada login|logout|whoami`.

The token lives in <tada home>/credentials.json (owner-only permissions).
TADA_TOKEN in the environment always wins over the file.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from tada.config import tada_home
from tada.errors import CredentialsError, EmptyTokenError

logger = logging.getLogger(__name__)

CRED_FILE_NAME = "credentials.json"
TOKEN_ENV = "TADA_TOKEN"


@dataclass(frozen=True)
class TokenInfo:
    token: str
    source: str  # "env" | "file"
    created_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None

    @property
    def expired(self) -> bool:
        if self.expires_at is None:
            return False
        return self.expires_at <= datetime.now(timezone.utc)


def cred_file_path() -> Path:
    return tada_home() / CRED_FILE_NAME


def strip_bearer(token: str) -> str:
    if token.lower().startswith("bearer "):
        return token[7:].strip()
    return token


def _parse_time(value: object, field: str) -> Optional[datetime]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise CredentialsError(f"parse credentials: {field} must be a string")
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise CredentialsError(f"parse credentials: {field}: {e}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_token() -> Optional[TokenInfo]:
    """Return the active token, or None when not logged in."""
    env = os.environ.get(TOKEN_ENV, "").strip()
    if env:
        return TokenInfo(token=strip_bearer(env), source="env")

    path = cred_file_path()
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        raise CredentialsError(f"read credentials: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CredentialsError(f"parse credentials: {e}") from e
    if not isinstance(data, dict) or not isinstance(data.get("token"), str):
        raise CredentialsError("parse credentials: missing token")

    return TokenInfo(
        token=strip_bearer(data["token"]),
        source="file",
        created_at=_parse_time(data.get("created_at"), "created_at"),
        expires_at=_parse_time(data.get("expires_at"), "expires_at"),
    )


def set_token(token: str, expires: Optional[datetime] = None) -> Path:
    """Persist a token to the credentials file. Returns the file path."""
    token = strip_bearer(token.lstrip()).strip()
    if not token:
        raise EmptyTokenError("empty token")

    home = tada_home()
    path = cred_file_path()
    payload = {
        "token": token,
        "source": "file",
        "created_at": datetime.now(timezone.utc).isoformat(),
        "expires_at": expires.isoformat() if expires is not None else None,
    }

    try:
        home.mkdir(mode=0o700, parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
        os.chmod(path, 0o600)
    except OSError as e:
        raise CredentialsError(f"write: {e}") from e

    logger.info("stored token in %s", path)
    return path


def delete_token() -> bool:
    """Remove the credentials file. Returns False if there was nothing to remove."""
    path = cred_file_path()
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise CredentialsError(f"remove: {e}") from e
    logger.info("removed %s", path)
    return True
