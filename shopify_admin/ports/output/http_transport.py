"""Output port for sending a single HTTP request."""
from __future__ import annotations

from typing import Protocol

from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor


class HttpTransport(Protocol):
  """Sends one request and returns status, headers and body text.

  Implementations perform exactly one round trip per call, release the
  connection on every exit path and raise
  :class:`~shopify_admin.domain.exceptions.TransportError` on network
  failures. Non-2xx statuses are returned, not raised.
  """

  def send(self, request: RequestDescriptor) -> ResponseDescriptor:
    ...
