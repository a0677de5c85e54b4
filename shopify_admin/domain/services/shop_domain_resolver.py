"""Resolution of shop identifiers to canonical admin hosts."""
from __future__ import annotations

import re
from typing import Optional
from urllib.parse import urlsplit

from shopify_admin.domain.exceptions import InvalidDomainError
from shopify_admin.domain.value_objects.shop_domain import ShopDomain

_ALLOWED_SCHEMES = ('http', 'https')
_UNSUPPORTED_CHARS = re.compile(r'[\s<>"{}|\\^`]')
_HOST_LABEL = re.compile(r'^(?!-)[a-z0-9-]{1,63}(?<!-)$')
_MAX_HOST_LENGTH = 253


class ShopDomainResolver:
  """Turns a bare shop host or a full URL into a :class:`ShopDomain`.

  ``my-shop.myshopify.com``, ``https://my-shop.myshopify.com/admin`` and
  ``HTTP://My-Shop.myshopify.com:443/?x=1`` all resolve to
  ``https://my-shop.myshopify.com``. Pure, performs no I/O.
  """

  def resolve(self, shop_identifier: Optional[str]) -> ShopDomain:
    if shop_identifier is None or not str(shop_identifier).strip():
      raise InvalidDomainError('Shop domain is required', shop_domain=shop_identifier)

    candidate = str(shop_identifier).strip()
    if _UNSUPPORTED_CHARS.search(candidate):
      raise InvalidDomainError(
        f'Shop domain contains unsupported characters: {candidate!r}',
        shop_domain=shop_identifier,
      )

    # Shopify hands out shop hosts without a scheme
    if '://' not in candidate:
      candidate = 'https://' + candidate.lstrip('/')

    try:
      parsed = urlsplit(candidate)
      host = parsed.hostname
      parsed.port  # raises ValueError on a malformed port
    except ValueError as exc:
      raise InvalidDomainError(
        f'Shop domain is not a well-formed URL: {shop_identifier!r}',
        shop_domain=shop_identifier,
      ) from exc

    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
      raise InvalidDomainError(
        f'Unsupported scheme {parsed.scheme!r} in shop domain',
        shop_domain=shop_identifier,
      )

    if not host or not self._is_valid_host(host):
      raise InvalidDomainError(
        f'Shop domain is not a valid host name: {shop_identifier!r}',
        shop_domain=shop_identifier,
      )

    return ShopDomain(host=host)

  @staticmethod
  def _is_valid_host(host: str) -> bool:
    if len(host) > _MAX_HOST_LENGTH:
      return False
    return all(_HOST_LABEL.match(label) for label in host.split('.'))
