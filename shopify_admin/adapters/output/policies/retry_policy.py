"""Retrying execution policy with exponential backoff."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from shopify_admin.domain.exceptions import TransportError
from shopify_admin.domain.services.response_validation import parse_retry_after
from shopify_admin.domain.value_objects.http_request import RequestDescriptor, ResponseDescriptor
from shopify_admin.ports.output.execution_policy import RequestExecutionPolicy, SendRequest

logger = logging.getLogger(__name__)

DEFAULT_RETRY_STATUSES = (429, 500, 502, 503, 504)


class RetryExecutionPolicy(RequestExecutionPolicy):
  """Re-sends a request on rate limiting, server errors and network failures.

  A 429 waits for the ``Retry-After`` header when present; every other
  retry waits ``backoff_factor * 2 ** attempt`` seconds, capped at
  ``max_backoff``. Once retries are exhausted the last response is
  returned (or the last TransportError re-raised) so the caller's
  response validation decides what to raise.
  """

  def __init__(
    self,
    max_retries: int = 3,
    backoff_factor: float = 0.5,
    max_backoff: float = 30.0,
    retry_statuses: Iterable[int] = DEFAULT_RETRY_STATUSES,
    sleep: Callable[[float], None] = time.sleep,
  ):
    if max_retries < 0:
      raise ValueError('max_retries must not be negative')
    if backoff_factor < 0 or max_backoff < 0:
      raise ValueError('backoff values must not be negative')
    self._max_retries = max_retries
    self._backoff_factor = backoff_factor
    self._max_backoff = max_backoff
    self._retry_statuses = frozenset(retry_statuses)
    self._sleep = sleep

  @property
  def max_retries(self) -> int:
    return self._max_retries

  def execute(self, request: RequestDescriptor, send: SendRequest) -> ResponseDescriptor:
    attempt = 0
    while True:
      try:
        response = send(request)
      except TransportError as e:
        if attempt >= self._max_retries:
          raise
        delay = self._backoff(attempt)
        logger.warning(
          'Network error on %s %s (%s), retrying in %.2fs (%d/%d)',
          request.method, request.url, e, delay, attempt + 1, self._max_retries,
        )
      else:
        if response.status_code not in self._retry_statuses or attempt >= self._max_retries:
          return response
        delay = self._delay_for(response, attempt)
        logger.warning(
          'Status %s on %s %s, retrying in %.2fs (%d/%d)',
          response.status_code, request.method, request.url, delay, attempt + 1, self._max_retries,
        )

      self._sleep(delay)
      attempt += 1

  def _delay_for(self, response: ResponseDescriptor, attempt: int) -> float:
    if response.status_code == 429:
      retry_after: Optional[float] = parse_retry_after(response.header('Retry-After'))
      if retry_after is not None:
        return min(retry_after, self._max_backoff)
    return self._backoff(attempt)

  def _backoff(self, attempt: int) -> float:
    return min(self._backoff_factor * (2 ** attempt), self._max_backoff)
