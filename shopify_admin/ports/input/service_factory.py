"""Input port shared by every resource service factory."""
from __future__ import annotations

from typing import Protocol, TypeVar

from shopify_admin.domain.value_objects.credentials import ApiCredentials

ServiceT = TypeVar('ServiceT', covariant=True)


class ServiceFactory(Protocol[ServiceT]):
  """Creates credential-bound service clients for one resource type.

  Creation performs no network calls; the configured execution policy is
  attached to every service returned.
  """

  def create(self, shop_domain: str, access_token: str) -> ServiceT:
    ...

  def create_from_credentials(self, credentials: ApiCredentials) -> ServiceT:
    ...
