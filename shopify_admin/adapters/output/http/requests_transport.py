"""Requests-based HTTP transport implementation."""
from __future__ import annotations

import logging

import requests

from shopify_admin.domain.exceptions import TransportError
from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor
from shopify_admin.ports.output.http_transport import HttpTransport

logger = logging.getLogger(__name__)


class RequestsHttpTransport(HttpTransport):
  """Sends requests with the requests library, one connection per call."""

  def __init__(self, timeout: float = 30):
    self._timeout = timeout

  def send(self, request: RequestDescriptor) -> ResponseDescriptor:
    logger.debug('%s %s', request.method, request.url.split('?', 1)[0])
    body = request.body.encode('utf-8') if request.body is not None else None

    try:
      response = requests.request(
        request.method,
        request.url,
        headers=request.headers,
        data=body,
        timeout=self._timeout,
      )
    except requests.RequestException as e:
      raise TransportError(f'Network error during {request.method} {request.url}: {e}') from e

    try:
      return ResponseDescriptor.build(response.status_code, response.text, response.headers)
    finally:
      response.close()
