"""Shared validation of admin API responses."""
from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from shopify_admin.domain.exceptions import ApiRequestError, RateLimitError
from shopify_admin.domain.value_objects.http_request import ResponseDescriptor

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = 'X-Request-Id'


def check_response(response: ResponseDescriptor) -> None:
  """Raise the matching :class:`ApiRequestError` when ``response`` is not a success.

  The body is inspected for Shopify's error shapes (``errors`` as a string,
  list or field map, or OAuth's ``error``/``error_description``) so the
  raised exception carries readable messages.
  """
  if response.ok:
    return

  errors = extract_error_messages(response.body)
  request_id = response.header(REQUEST_ID_HEADER)
  summary = '; '.join(errors) if errors else 'no error details'
  message = f'Response did not indicate success. Status: {response.status_code}. {summary}'

  logger.debug('Request %s failed with status %s', request_id or '-', response.status_code)

  if response.status_code == 429:
    raise RateLimitError(
      message,
      status_code=response.status_code,
      body=response.body,
      errors=errors,
      request_id=request_id,
      retry_after=parse_retry_after(response.header('Retry-After')),
    )

  raise ApiRequestError(
    message,
    status_code=response.status_code,
    body=response.body,
    errors=errors,
    request_id=request_id,
  )


def extract_error_messages(body: str) -> List[str]:
  if not body or not body.strip():
    return []

  try:
    data = json.loads(body)
  except ValueError:
    return [body.strip()]

  if not isinstance(data, dict):
    return [str(data)]

  if 'errors' in data:
    return _flatten_errors(data['errors'])

  if 'error' in data:
    description = data.get('error_description')
    return [f'{data["error"]}: {description}' if description else str(data['error'])]

  return []


def _flatten_errors(errors: Any) -> List[str]:
  if isinstance(errors, str):
    return [errors]
  if isinstance(errors, list):
    return [str(item) for item in errors]
  if isinstance(errors, dict):
    messages: List[str] = []
    for field_name, value in errors.items():
      values = value if isinstance(value, list) else [value]
      messages.extend(f'{field_name}: {item}' for item in values)
    return messages
  return [str(errors)]


def parse_retry_after(value: Optional[str]) -> Optional[float]:
  """Seconds to wait according to a ``Retry-After`` header, when numeric."""
  if not value:
    return None
  try:
    seconds = float(value)
  except ValueError:
    return None
  return max(seconds, 0.0)
