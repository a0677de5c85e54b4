"""Base class for credential-bound admin API services."""
from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from shopify_admin.adapters.output.http.requests_transport import RequestsHttpTransport
from shopify_admin.adapters.output.policies.default_policy import DefaultExecutionPolicy
from shopify_admin.domain.exceptions import ApiRequestError, InvalidArgumentError
from shopify_admin.domain.services.response_validation import check_response
from shopify_admin.domain.services.shop_domain_resolver import ShopDomainResolver
from shopify_admin.domain.value_objects.http_request import RequestDescriptor
from shopify_admin.domain.value_objects.shop_domain import ShopDomain
from shopify_admin.ports.output.domain_resolver import DomainResolver
from shopify_admin.ports.output.execution_policy import RequestExecutionPolicy
from shopify_admin.ports.output.http_transport import HttpTransport
from shopify_admin.ports.output.response_validator import ResponseValidator

logger = logging.getLogger(__name__)

DEFAULT_API_VERSION = '2024-07'
ACCESS_TOKEN_HEADER = 'X-Shopify-Access-Token'


class ShopifyService:
  """Shared request path for every resource service.

  Each request is described once as an immutable :class:`RequestDescriptor`
  and handed to the execution policy together with the transport's
  ``send``, so retrying policies can re-issue it unchanged.
  """

  def __init__(
    self,
    shop_domain: str,
    access_token: str,
    domain_resolver: Optional[DomainResolver] = None,
    transport: Optional[HttpTransport] = None,
    response_validator: Optional[ResponseValidator] = None,
    api_version: Optional[str] = None,
  ):
    if not access_token:
      raise InvalidArgumentError('access_token is required', argument='access_token')
    self._shop_domain = (domain_resolver or ShopDomainResolver()).resolve(shop_domain)
    self._access_token = access_token
    self._transport = transport or RequestsHttpTransport()
    self._check_response = response_validator or check_response
    self._api_version = api_version or DEFAULT_API_VERSION
    self._execution_policy: RequestExecutionPolicy = DefaultExecutionPolicy()

  @property
  def shop_domain(self) -> ShopDomain:
    return self._shop_domain

  @property
  def api_version(self) -> str:
    return self._api_version

  @property
  def execution_policy(self) -> RequestExecutionPolicy:
    return self._execution_policy

  def set_execution_policy(self, execution_policy: RequestExecutionPolicy) -> None:
    if execution_policy is None:
      raise InvalidArgumentError('execution_policy is required', argument='execution_policy')
    self._execution_policy = execution_policy

  def build_request(
    self,
    method: str,
    path: str,
    query: Optional[Mapping[str, Any]] = None,
    payload: Optional[Mapping[str, Any]] = None,
  ) -> RequestDescriptor:
    url = self._shop_domain.url_for(f'admin/api/{self._api_version}/{path.lstrip("/")}')
    if query:
      url = f'{url}?{urlencode(query, doseq=True)}'

    headers = {ACCESS_TOKEN_HEADER: self._access_token, 'Accept': 'application/json'}
    body = None
    if payload is not None:
      headers['Content-Type'] = 'application/json'
      body = json.dumps(payload)

    return RequestDescriptor.build(method, url, headers, body)

  def execute_request(
    self,
    method: str,
    path: str,
    query: Optional[Mapping[str, Any]] = None,
    payload: Optional[Mapping[str, Any]] = None,
    root_element: Optional[str] = None,
  ) -> Any:
    """Send a request through the execution policy and return the parsed JSON body.

    Returns ``None`` for empty bodies (e.g. DELETE). When ``root_element``
    is given the matching top-level key is returned instead of the whole
    document.
    """
    request = self.build_request(method, path, query, payload)
    response = self._execution_policy.execute(request, self._transport.send)
    self._check_response(response)

    if not response.body.strip():
      return None

    try:
      data = response.json()
    except ValueError as e:
      raise ApiRequestError(
        f'Response from {path} is not valid JSON',
        status_code=response.status_code,
        body=response.body,
      ) from e

    if root_element is not None:
      return data.get(root_element) if isinstance(data, dict) else None
    return data
