"""Verification helpers for requests Shopify sends to the app."""
from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Iterable, List, Mapping, Sequence, Tuple, Union
from urllib.parse import urlencode

QueryValue = Union[str, Sequence[str]]
QueryItems = Union[Mapping[str, QueryValue], Iterable[Tuple[str, QueryValue]]]

_SIGNATURE_KEYS = ('hmac', 'signature')


def generate_state(length: int = 32) -> str:
  """Random URL-safe nonce for the ``state`` parameter of the authorization URL."""
  return secrets.token_urlsafe(length)


def is_authentic_request(query: QueryItems, client_secret: str) -> bool:
  """Check the ``hmac`` parameter of an OAuth callback or app launch querystring.

  Parameters are sorted, ``hmac`` and ``signature`` are dropped and array
  parameters (``ids[]``) are collapsed to ``ids=["1", "2"]`` before
  signing with the app's client secret.
  """
  items = list(query.items()) if isinstance(query, Mapping) else list(query)
  received = next((value for key, value in items if key == 'hmac'), None)
  if not received or not client_secret:
    return False
  if not isinstance(received, str):
    received = received[0] if received else ''

  expected = calculate_hmac(client_secret, items)
  return hmac.compare_digest(expected.encode('utf-8'), received.encode('utf-8'))


def calculate_hmac(client_secret: str, items: Iterable[Tuple[str, QueryValue]]) -> str:
  return hmac.new(
    client_secret.encode('utf-8'),
    encode_params_for_hmac(items).encode('utf-8'),
    hashlib.sha256,
  ).hexdigest()


def encode_params_for_hmac(items: Iterable[Tuple[str, QueryValue]]) -> str:
  params: List[Tuple[str, str]] = []
  for key, value in items:
    if key in _SIGNATURE_KEYS:
      continue
    if key.endswith('[]'):
      values = [value] if isinstance(value, str) else list(value)
      params.append((key[:-2], '[' + ', '.join(f'"{item}"' for item in values) + ']'))
    elif isinstance(value, str):
      params.append((key, value))
    else:
      params.append((key, ','.join(value)))
  return urlencode(sorted(params), safe=':/')
