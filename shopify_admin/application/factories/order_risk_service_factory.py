"""Factory for credential-bound order risk services."""
from __future__ import annotations

from typing import Optional

from shopify_admin.application.services.order_risk_service import OrderRiskService
from shopify_admin.domain.value_objects.credentials import ApiCredentials
from shopify_admin.ports.input.service_factory import ServiceFactory
from shopify_admin.ports.output.domain_resolver import DomainResolver
from shopify_admin.ports.output.execution_policy import RequestExecutionPolicy
from shopify_admin.ports.output.http_transport import HttpTransport


class OrderRiskServiceFactory(ServiceFactory[OrderRiskService]):
  """Creates :class:`OrderRiskService` instances sharing one execution policy.

  Collaborators left as ``None`` fall back to the service's built-in
  defaults (default domain resolution, single-attempt execution).
  """

  def __init__(
    self,
    execution_policy: Optional[RequestExecutionPolicy] = None,
    domain_resolver: Optional[DomainResolver] = None,
    transport: Optional[HttpTransport] = None,
    api_version: Optional[str] = None,
  ):
    self._execution_policy = execution_policy
    self._domain_resolver = domain_resolver
    self._transport = transport
    self._api_version = api_version

  def create(self, shop_domain: str, access_token: str) -> OrderRiskService:
    service = OrderRiskService(
      shop_domain,
      access_token,
      domain_resolver=self._domain_resolver,
      transport=self._transport,
      api_version=self._api_version,
    )

    if self._execution_policy is not None:
      service.set_execution_policy(self._execution_policy)

    return service

  def create_from_credentials(self, credentials: ApiCredentials) -> OrderRiskService:
    return self.create(credentials.shop_domain, credentials.access_token)
