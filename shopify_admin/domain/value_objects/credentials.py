"""Value objects for API credentials."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from shopify_admin.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class ApiCredentials:
  """Shop domain and access token used to call the admin API."""

  shop_domain: str
  access_token: str = field(repr=False)

  def __post_init__(self) -> None:
    if not self.shop_domain:
      raise InvalidArgumentError('shop_domain is required', argument='shop_domain')
    if not self.access_token:
      raise InvalidArgumentError('access_token is required', argument='access_token')

  def as_headers(self) -> Dict[str, str]:
    """Return HTTP headers representing the credentials."""
    return {'X-Shopify-Access-Token': self.access_token}
