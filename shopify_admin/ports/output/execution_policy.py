"""Output port for request execution strategies."""
from __future__ import annotations

from typing import Callable, Protocol

from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor

SendRequest = Callable[[RequestDescriptor], ResponseDescriptor]


class RequestExecutionPolicy(Protocol):
  """Strategy governing how one logical request is actually sent.

  ``send`` performs a single round trip. A policy may call it any number
  of times (retrying, delaying or rate limiting in between) but must pass
  the same, unmodified ``request`` each time.
  """

  def execute(self, request: RequestDescriptor, send: SendRequest) -> ResponseDescriptor:
    ...
