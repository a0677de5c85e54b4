"""Output port for shop domain resolution."""
from __future__ import annotations

from typing import Optional, Protocol

from shopify_admin.domain.value_objects.shop_domain import ShopDomain


class DomainResolver(Protocol):
  def resolve(self, shop_identifier: Optional[str]) -> ShopDomain:
    """Normalize a bare host or URL to a canonical shop domain.

    Raises:
      InvalidDomainError: If the identifier cannot be normalized
    """
    ...
