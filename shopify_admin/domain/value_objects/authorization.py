"""Value objects for the OAuth authorization flow."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional, Tuple, Union


class AuthorizationScope(str, Enum):
  """Known Shopify access scopes, serialized as their value."""
  READ_ALL_ORDERS = 'read_all_orders'
  READ_ANALYTICS = 'read_analytics'
  READ_ASSIGNED_FULFILLMENT_ORDERS = 'read_assigned_fulfillment_orders'
  WRITE_ASSIGNED_FULFILLMENT_ORDERS = 'write_assigned_fulfillment_orders'
  READ_CHECKOUTS = 'read_checkouts'
  WRITE_CHECKOUTS = 'write_checkouts'
  READ_CONTENT = 'read_content'
  WRITE_CONTENT = 'write_content'
  READ_CUSTOMERS = 'read_customers'
  WRITE_CUSTOMERS = 'write_customers'
  READ_DISCOUNTS = 'read_discounts'
  WRITE_DISCOUNTS = 'write_discounts'
  READ_DRAFT_ORDERS = 'read_draft_orders'
  WRITE_DRAFT_ORDERS = 'write_draft_orders'
  READ_FULFILLMENTS = 'read_fulfillments'
  WRITE_FULFILLMENTS = 'write_fulfillments'
  READ_GIFT_CARDS = 'read_gift_cards'
  WRITE_GIFT_CARDS = 'write_gift_cards'
  READ_INVENTORY = 'read_inventory'
  WRITE_INVENTORY = 'write_inventory'
  READ_LOCATIONS = 'read_locations'
  READ_MARKETING_EVENTS = 'read_marketing_events'
  WRITE_MARKETING_EVENTS = 'write_marketing_events'
  READ_MERCHANT_MANAGED_FULFILLMENT_ORDERS = 'read_merchant_managed_fulfillment_orders'
  WRITE_MERCHANT_MANAGED_FULFILLMENT_ORDERS = 'write_merchant_managed_fulfillment_orders'
  READ_ORDERS = 'read_orders'
  WRITE_ORDERS = 'write_orders'
  READ_PRICE_RULES = 'read_price_rules'
  WRITE_PRICE_RULES = 'write_price_rules'
  READ_PRODUCT_LISTINGS = 'read_product_listings'
  READ_PRODUCTS = 'read_products'
  WRITE_PRODUCTS = 'write_products'
  READ_REPORTS = 'read_reports'
  WRITE_REPORTS = 'write_reports'
  READ_RESOURCE_FEEDBACKS = 'read_resource_feedbacks'
  WRITE_RESOURCE_FEEDBACKS = 'write_resource_feedbacks'
  READ_SCRIPT_TAGS = 'read_script_tags'
  WRITE_SCRIPT_TAGS = 'write_script_tags'
  READ_SHIPPING = 'read_shipping'
  WRITE_SHIPPING = 'write_shipping'
  READ_THEMES = 'read_themes'
  WRITE_THEMES = 'write_themes'
  READ_THIRD_PARTY_FULFILLMENT_ORDERS = 'read_third_party_fulfillment_orders'
  WRITE_THIRD_PARTY_FULFILLMENT_ORDERS = 'write_third_party_fulfillment_orders'
  READ_USERS = 'read_users'
  WRITE_USERS = 'write_users'


ScopeLike = Union[AuthorizationScope, str]


def normalize_scopes(scopes: Union[ScopeLike, Iterable[ScopeLike]]) -> Tuple[str, ...]:
  """Convert enum members or raw strings to canonical scope strings, keeping order.

  A single scope (a plain string or enum member) is treated as a one-item
  sequence.
  """
  if isinstance(scopes, str):
    scopes = (scopes,)
  return tuple(
    scope.value if isinstance(scope, AuthorizationScope) else str(scope)
    for scope in scopes
  )


@dataclass(frozen=True)
class AuthorizationUrlOptions:
  """Grouped arguments for building an authorization URL."""
  scopes: Tuple[ScopeLike, ...]
  shop_domain: str
  client_id: str
  redirect_url: str
  state: Optional[str] = None
  grants: Optional[Tuple[str, ...]] = None


@dataclass(frozen=True)
class RefreshAccessTokenOptions:
  """Grouped arguments for refreshing a store access token."""
  shop_domain: str
  client_id: str
  client_secret: str
  refresh_token: str
  existing_store_access_token: str


@dataclass(frozen=True)
class AuthorizationResult:
  """Access token and granted scopes returned by the token endpoint."""
  access_token: str
  granted_scopes: Tuple[str, ...] = field(default_factory=tuple)

  @staticmethod
  def from_response(response_data: dict) -> 'AuthorizationResult':
    raw_scope = response_data.get('scope') or ''
    if not isinstance(raw_scope, str):
      raw_scope = ','.join(str(scope) for scope in raw_scope)
    return AuthorizationResult(
      access_token=response_data['access_token'],
      granted_scopes=tuple(raw_scope.split(',')) if raw_scope else (),
    )
