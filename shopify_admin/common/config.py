"""Application-level configuration utilities."""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from shopify_admin.application.services.shopify_service import DEFAULT_API_VERSION


@dataclass(frozen=True)
class Settings:
  """Immutable client settings loaded from environment variables."""

  client_id: Optional[str] = None
  client_secret: Optional[str] = field(default=None, repr=False)
  api_version: str = DEFAULT_API_VERSION
  http_timeout: float = 30.0
  max_retries: int = 0
  log_level: str = 'INFO'


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Load settings from environment variables once per process."""
  env_path = Path.cwd() / '.env'
  if env_path.exists():
    load_dotenv(env_path)
  else:
    load_dotenv()

  from os import getenv

  return Settings(
    client_id=getenv('SHOPIFY_CLIENT_ID') or None,
    client_secret=getenv('SHOPIFY_CLIENT_SECRET') or None,
    api_version=getenv('SHOPIFY_API_VERSION') or DEFAULT_API_VERSION,
    http_timeout=_parse_number('SHOPIFY_HTTP_TIMEOUT', getenv('SHOPIFY_HTTP_TIMEOUT'), 30.0, float),
    max_retries=_parse_number('SHOPIFY_MAX_RETRIES', getenv('SHOPIFY_MAX_RETRIES'), 0, int),
    log_level=(getenv('SHOPIFY_LOG_LEVEL') or 'INFO').upper(),
  )


def _parse_number(name: str, raw: Optional[str], default, cast):
  if raw is None or not raw.strip():
    return default
  try:
    value = cast(raw)
  except ValueError as e:
    raise ValueError(f'{name} must be a number, got {raw!r}') from e
  if value < 0:
    raise ValueError(f'{name} must not be negative')
  return value
