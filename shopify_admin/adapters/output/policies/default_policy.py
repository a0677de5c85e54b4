"""Single-attempt execution policy."""
from __future__ import annotations

from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor
from shopify_admin.ports.output.execution_policy import RequestExecutionPolicy, SendRequest


class DefaultExecutionPolicy(RequestExecutionPolicy):
  """Sends the request once and returns whatever comes back."""

  def execute(self, request: RequestDescriptor, send: SendRequest) -> ResponseDescriptor:
    return send(request)
