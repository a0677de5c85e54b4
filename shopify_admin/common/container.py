"""Simple dependency wiring helpers."""
from __future__ import annotations

from typing import Optional

from shopify_admin.adapters.output.http.requests_transport import RequestsHttpTransport
from shopify_admin.adapters.output.policies.default_policy import DefaultExecutionPolicy
from shopify_admin.adapters.output.policies.retry_policy import RetryExecutionPolicy
from shopify_admin.application.factories.order_risk_service_factory import OrderRiskServiceFactory
from shopify_admin.application.services.oauth_utility_impl import ShopifyOAuthUtility
from shopify_admin.common.config import Settings, get_settings
from shopify_admin.domain.services.shop_domain_resolver import ShopDomainResolver
from shopify_admin.ports.output.execution_policy import RequestExecutionPolicy


def create_execution_policy(settings: Optional[Settings] = None) -> RequestExecutionPolicy:
  settings = settings or get_settings()
  if settings.max_retries > 0:
    return RetryExecutionPolicy(max_retries=settings.max_retries)
  return DefaultExecutionPolicy()


def create_oauth_utility(settings: Optional[Settings] = None) -> ShopifyOAuthUtility:
  settings = settings or get_settings()
  return ShopifyOAuthUtility(
    domain_resolver=ShopDomainResolver(),
    transport=RequestsHttpTransport(timeout=settings.http_timeout),
  )


def create_order_risk_service_factory(settings: Optional[Settings] = None) -> OrderRiskServiceFactory:
  settings = settings or get_settings()
  return OrderRiskServiceFactory(
    execution_policy=create_execution_policy(settings),
    transport=RequestsHttpTransport(timeout=settings.http_timeout),
    api_version=settings.api_version,
  )
