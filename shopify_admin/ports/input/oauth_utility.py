"""Input port defining the OAuth utility contract."""
from __future__ import annotations

from typing import Iterable, Optional, Protocol, Union

from shopify_admin.domain.value_objects.authorization import (
  AuthorizationResult,
  AuthorizationUrlOptions,
  RefreshAccessTokenOptions,
  ScopeLike,
)


class OAuthUtility(Protocol):
  """Builds authorization URLs and exchanges codes or refresh tokens for access tokens."""

  def build_authorization_url(
    self,
    scopes: Union[ScopeLike, Iterable[ScopeLike]],
    shop_domain: str,
    client_id: str,
    redirect_url: str,
    state: Optional[str] = None,
    grants: Optional[Union[str, Iterable[str]]] = None,
  ) -> str:
    """Build the URL the merchant is redirected to for granting access.

    Args:
      scopes: Permissions the app needs, as AuthorizationScope members or raw strings
      shop_domain: The shop's *.myshopify.com host or URL
      client_id: The app's public client ID (API key)
      redirect_url: Where Shopify sends the merchant after consenting
      state: Optional nonce echoed back on the callback
      grants: Optional grant options, e.g. ``per-user`` for online tokens

    Raises:
      InvalidDomainError: If the shop domain cannot be resolved
      InvalidArgumentError: If client_id or redirect_url is empty
    """
    ...

  def build_authorization_url_from_options(self, options: AuthorizationUrlOptions) -> str:
    ...

  def authorize(
    self, code: str, shop_domain: str, client_id: str, client_secret: str
  ) -> AuthorizationResult:
    """Exchange the authorization code from the callback for an access token.

    Raises:
      InvalidArgumentError: If any argument is empty
      ApiRequestError: If the token endpoint rejects the request
      TransportError: On network failure
    """
    ...

  def refresh_access_token(
    self,
    shop_domain: str,
    client_id: str,
    client_secret: str,
    refresh_token: str,
    existing_store_access_token: str,
  ) -> AuthorizationResult:
    """Rotate a store access token using the app's refresh token.

    Raises:
      InvalidArgumentError: If any argument is empty
      ApiRequestError: If the token endpoint rejects the request
      TransportError: On network failure
    """
    ...

  def refresh_access_token_from_options(self, options: RefreshAccessTokenOptions) -> AuthorizationResult:
    ...
