"""Immutable descriptions of HTTP requests and responses."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple


def _freeze_headers(headers: Optional[Mapping[str, str]]) -> Tuple[Tuple[str, str], ...]:
  return tuple((str(key), str(value)) for key, value in (headers or {}).items())


@dataclass(frozen=True)
class RequestDescriptor:
  """A re-issuable HTTP request.

  Execution policies may send the same descriptor several times, so it
  carries no state that changes when it is sent.
  """

  method: str
  url: str
  header_items: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)
  body: Optional[str] = None

  @staticmethod
  def build(
    method: str,
    url: str,
    headers: Optional[Mapping[str, str]] = None,
    body: Optional[str] = None,
  ) -> 'RequestDescriptor':
    return RequestDescriptor(
      method=method.upper(),
      url=url,
      header_items=_freeze_headers(headers),
      body=body,
    )

  @staticmethod
  def json_post(url: str, payload: Mapping[str, Any], headers: Optional[Mapping[str, str]] = None) -> 'RequestDescriptor':
    merged = {'Content-Type': 'application/json', 'Accept': 'application/json'}
    merged.update(headers or {})
    return RequestDescriptor.build('POST', url, merged, json.dumps(payload))

  @property
  def headers(self) -> Dict[str, str]:
    """A fresh dict copy; mutating it does not affect the descriptor."""
    return dict(self.header_items)

  def with_headers(self, headers: Mapping[str, str]) -> 'RequestDescriptor':
    merged = self.headers
    merged.update(headers)
    return RequestDescriptor(self.method, self.url, _freeze_headers(merged), self.body)


@dataclass(frozen=True)
class ResponseDescriptor:
  """Status, headers and text body of one HTTP response."""

  status_code: int
  body: str = ''
  header_items: Tuple[Tuple[str, str], ...] = field(default_factory=tuple)

  @staticmethod
  def build(status_code: int, body: str = '', headers: Optional[Mapping[str, str]] = None) -> 'ResponseDescriptor':
    return ResponseDescriptor(status_code=status_code, body=body, header_items=_freeze_headers(headers))

  @property
  def ok(self) -> bool:
    return 200 <= self.status_code < 300

  @property
  def headers(self) -> Dict[str, str]:
    return dict(self.header_items)

  def header(self, name: str) -> Optional[str]:
    """Case-insensitive header lookup."""
    lowered = name.lower()
    for key, value in self.header_items:
      if key.lower() == lowered:
        return value
    return None

  def json(self) -> Any:
    return json.loads(self.body)
