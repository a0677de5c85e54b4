"""Shopify OAuth authorization and token exchange."""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple, Union

from shopify_admin.adapters.output.http.requests_transport import RequestsHttpTransport
from shopify_admin.domain.exceptions import ApiRequestError, InvalidArgumentError
from shopify_admin.domain.services.response_validation import check_response
from shopify_admin.domain.services.shop_domain_resolver import ShopDomainResolver
from shopify_admin.domain.value_objects.authorization import (
  AuthorizationResult,
  AuthorizationUrlOptions,
  RefreshAccessTokenOptions,
  ScopeLike,
  normalize_scopes,
)
from shopify_admin.domain.value_objects.http_request import RequestDescriptor
from shopify_admin.ports.input.oauth_utility import OAuthUtility
from shopify_admin.ports.output.domain_resolver import DomainResolver
from shopify_admin.ports.output.http_transport import HttpTransport
from shopify_admin.ports.output.response_validator import ResponseValidator

logger = logging.getLogger(__name__)

AUTHORIZE_PATH = 'admin/oauth/authorize'
ACCESS_TOKEN_PATH = 'admin/oauth/access_token'


class ShopifyOAuthUtility(OAuthUtility):
  """OAuth flow against a shop's admin endpoints.

  Token requests are sent directly through the transport: exactly one
  round trip per call, no execution policy and no retries. Callers that
  need resilience around the token endpoint wrap these calls themselves.
  """

  def __init__(
    self,
    domain_resolver: Optional[DomainResolver] = None,
    transport: Optional[HttpTransport] = None,
    response_validator: Optional[ResponseValidator] = None,
  ):
    self._domain_resolver = domain_resolver or ShopDomainResolver()
    self._transport = transport or RequestsHttpTransport()
    self._check_response = response_validator or check_response

  def build_authorization_url(
    self,
    scopes: Union[ScopeLike, Iterable[ScopeLike]],
    shop_domain: str,
    client_id: str,
    redirect_url: str,
    state: Optional[str] = None,
    grants: Optional[Union[str, Iterable[str]]] = None,
  ) -> str:
    _require(client_id=client_id, redirect_url=redirect_url)
    domain = self._domain_resolver.resolve(shop_domain)

    query: List[Tuple[str, str]] = [
      ('client_id', client_id),
      ('scope', ','.join(normalize_scopes(scopes))),
      ('redirect_uri', redirect_url),
    ]
    if state:
      query.append(('state', state))
    if isinstance(grants, str):
      grants = [grants]
    query.extend(('grant_options[]', grant) for grant in list(grants or []))

    return domain.url_for(AUTHORIZE_PATH, query)

  def build_authorization_url_from_options(self, options: AuthorizationUrlOptions) -> str:
    return self.build_authorization_url(
      options.scopes,
      options.shop_domain,
      options.client_id,
      options.redirect_url,
      options.state,
      options.grants,
    )

  def authorize(
    self, code: str, shop_domain: str, client_id: str, client_secret: str
  ) -> AuthorizationResult:
    _require(code=code, client_id=client_id, client_secret=client_secret)
    return self._request_token(shop_domain, {
      'client_id': client_id,
      'client_secret': client_secret,
      'code': code,
    })

  def refresh_access_token(
    self,
    shop_domain: str,
    client_id: str,
    client_secret: str,
    refresh_token: str,
    existing_store_access_token: str,
  ) -> AuthorizationResult:
    _require(
      client_id=client_id,
      client_secret=client_secret,
      refresh_token=refresh_token,
      existing_store_access_token=existing_store_access_token,
    )
    # Same endpoint as authorize, Shopify tells them apart by the payload
    return self._request_token(shop_domain, {
      'client_id': client_id,
      'client_secret': client_secret,
      'refresh_token': refresh_token,
      'access_token': existing_store_access_token,
    })

  def refresh_access_token_from_options(self, options: RefreshAccessTokenOptions) -> AuthorizationResult:
    return self.refresh_access_token(
      options.shop_domain,
      options.client_id,
      options.client_secret,
      options.refresh_token,
      options.existing_store_access_token,
    )

  def _request_token(self, shop_domain: str, payload: Dict[str, str]) -> AuthorizationResult:
    domain = self._domain_resolver.resolve(shop_domain)
    request = RequestDescriptor.json_post(domain.url_for(ACCESS_TOKEN_PATH), payload)

    logger.info('Requesting access token from %s', domain.host)
    response = self._transport.send(request)
    self._check_response(response)

    try:
      token_data = response.json()
    except ValueError as e:
      raise ApiRequestError(
        'Token response is not valid JSON',
        status_code=response.status_code,
        body=response.body,
      ) from e

    if not isinstance(token_data, dict) or not token_data.get('access_token'):
      raise ApiRequestError(
        'Token response missing access_token',
        status_code=response.status_code,
        body=response.body,
      )

    result = AuthorizationResult.from_response(token_data)
    logger.info('Obtained access token for %s with %d scopes', domain.host, len(result.granted_scopes))
    return result


def _require(**arguments: Optional[str]) -> None:
  for name, value in arguments.items():
    if not value:
      raise InvalidArgumentError(f'{name} is required', argument=name)
