"""Shared fixtures for the client tests."""
from __future__ import annotations

from typing import List, Union

import pytest

from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor


class FakeTransport:
  """Returns queued outcomes in order; the last one repeats once the queue runs dry."""

  def __init__(self, *outcomes: Union[ResponseDescriptor, Exception]):
    self._outcomes = list(outcomes)
    self.requests: List[RequestDescriptor] = []

  def send(self, request: RequestDescriptor) -> ResponseDescriptor:
    self.requests.append(request)
    outcome = self._outcomes.pop(0) if len(self._outcomes) > 1 else self._outcomes[0]
    if isinstance(outcome, Exception):
      raise outcome
    return outcome


@pytest.fixture
def make_transport():
  return FakeTransport


@pytest.fixture
def token_response():
  return ResponseDescriptor.build(
    200, '{"access_token":"tok123","scope":"read_orders,write_orders"}', {'Content-Type': 'application/json'}
  )
