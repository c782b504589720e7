"""Credentials loaded from the process environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

SPACE_ID_ENV = "SPACE_ID"
ACCESS_TOKEN_ENV = "CPA_TOKEN"
ENVIRONMENT_ID_ENV = "ENVIRONMENT_ID"
DEBUG_MODE_ENV = "DEBUG_MODE"
DEFAULT_ENVIRONMENT_ID = "master"


@dataclass(frozen=True, slots=True)
class Credentials:
    """Content API identifiers and preview token."""

    space_id: str
    access_token: str
    environment_id: str = DEFAULT_ENVIRONMENT_ID

    def __repr__(self) -> str:
        return (
            f"Credentials(space_id={self.space_id!r}, access_token='***', "
            f"environment_id={self.environment_id!r})"
        )


def load_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """Read credentials from environment variables.

    Args:
        environ: Environment mapping, defaults to ``os.environ``.

    Returns:
        Parsed credentials.

    Raises:
        ValueError: If the space id or access token is missing.
    """
    env = os.environ if environ is None else environ
    space_id = (env.get(SPACE_ID_ENV) or "").strip()
    access_token = (env.get(ACCESS_TOKEN_ENV) or "").strip()
    if not space_id or not access_token:
        raise ValueError(f"Set {SPACE_ID_ENV} and {ACCESS_TOKEN_ENV} and {ENVIRONMENT_ID_ENV} env vars.")
    environment_id = (env.get(ENVIRONMENT_ID_ENV) or "").strip() or DEFAULT_ENVIRONMENT_ID
    return Credentials(space_id=space_id, access_token=access_token, environment_id=environment_id)
