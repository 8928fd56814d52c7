"""Process configuration read from the environment.

``REDDIT_CLIENT_ID`` and ``REDDIT_CLIENT_SECRET`` are required. ``PORT`` is
optional and defaults to 3000.
"""

import os
import re
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict

from .errors import ConfigError
from .models import Credentials

CLIENT_ID_VAR = "REDDIT_CLIENT_ID"
CLIENT_SECRET_VAR = "REDDIT_CLIENT_SECRET"
PORT_VAR = "PORT"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

# Applied to every outbound call, token and listing alike.
HTTP_TIMEOUT_SECONDS = 10.0


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    credentials: Credentials
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT


def _require(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigError(f"{name} missing")
    return value


def parse_port(raw: str | None) -> int:
    """Parse ``PORT`` as an unsigned 16-bit integer, defaulting to 3000."""
    if raw is None:
        return DEFAULT_PORT
    # Same grammar as an unsigned integer literal: optional "+", ASCII digits.
    if not re.fullmatch(r"\+?[0-9]+", raw):
        raise ConfigError(f"{PORT_VAR} must be an integer, got {raw!r}")
    port = int(raw)
    if port > 65535:
        raise ConfigError(f"{PORT_VAR} out of range: {port}")
    return port


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build ``Settings`` from the environment, raising ``ConfigError`` on bad input."""
    if environ is None:
        environ = os.environ

    credentials = Credentials(
        client_id=_require(environ, CLIENT_ID_VAR),
        client_secret=_require(environ, CLIENT_SECRET_VAR),
    )
    return Settings(credentials=credentials, port=parse_port(environ.get(PORT_VAR)))
