"""Exceptions raised by the Shopify admin client."""
from __future__ import annotations

from typing import List, Optional


class ShopifyError(Exception):
  """Base exception for all client errors."""


class InvalidDomainError(ShopifyError, ValueError):
  """The shop identifier cannot be normalized to a host."""

  def __init__(self, message: str, shop_domain: Optional[str] = None):
    super().__init__(message)
    self.shop_domain = shop_domain


class InvalidArgumentError(ShopifyError, ValueError):
  """A required argument was empty or missing."""

  def __init__(self, message: str, argument: Optional[str] = None):
    super().__init__(message)
    self.argument = argument


class ApiRequestError(ShopifyError):
  """The API answered with a non-success status or an unusable body."""

  def __init__(
    self,
    message: str,
    status_code: int,
    body: str = '',
    errors: Optional[List[str]] = None,
    request_id: Optional[str] = None,
  ):
    super().__init__(message)
    self.status_code = status_code
    self.body = body
    self.errors = list(errors or [])
    self.request_id = request_id


class RateLimitError(ApiRequestError):
  """The API rejected the request with 429 Too Many Requests."""

  def __init__(
    self,
    message: str,
    status_code: int = 429,
    body: str = '',
    errors: Optional[List[str]] = None,
    request_id: Optional[str] = None,
    retry_after: Optional[float] = None,
  ):
    super().__init__(message, status_code, body, errors, request_id)
    self.retry_after = retry_after


class TransportError(ShopifyError):
  """Network failure while sending a request (DNS, connection reset, timeout)."""
