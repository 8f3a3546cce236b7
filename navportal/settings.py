"""Environment-driven settings.

Loaded from the process environment, after `.env` at the repo root.

  DATA_DIR     directory for the file store (default ./data)
  SECRET_KEY   token signing key; random per process when unset
  ADMIN*       admin credentials, one per variable, "username:password"
  USER*        guest credentials, same format
"""

import logging
import os
import secrets
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv

ROOT = Path(__file__).parent.parent
load_dotenv(ROOT / ".env")

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = ROOT / "data"

Credential = tuple[str, str]


@dataclass
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    secret_key: str = ""
    admins: list[Credential] = field(default_factory=list)
    guests: list[Credential] = field(default_factory=list)


def parse_credentials(environ: Mapping[str, str], prefix: str) -> list[Credential]:
    """Collect "user:pass" values from variables starting with prefix.

    Variables are taken in name order so first-match is deterministic.
    Values without a colon are skipped.
    """
    creds: list[Credential] = []
    for name in sorted(environ):
        if not name.startswith(prefix):
            continue
        value = environ[name]
        if ":" not in value:
            logger.debug("Ignoring %s: expected username:password", name)
            continue
        username, password = value.split(":", 1)
        creds.append((username, password))
    return creds


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    env = os.environ if environ is None else environ
    secret = env.get("SECRET_KEY", "")
    if not secret:
        logger.warning("SECRET_KEY not set; tokens will not survive a restart")
        secret = secrets.token_urlsafe(32)
    return Settings(
        data_dir=Path(env.get("DATA_DIR", str(DEFAULT_DATA_DIR))),
        secret_key=secret,
        admins=parse_credentials(env, "ADMIN"),
        guests=parse_credentials(env, "USER"),
    )
