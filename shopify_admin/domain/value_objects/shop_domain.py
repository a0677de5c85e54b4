"""Value object for a shop's admin host."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
from urllib.parse import quote


def escape_illegal_chars(value: str) -> str:
  """Percent-encode only characters that can never appear raw in a URL.

  Spaces, control characters and non-ASCII characters are escaped;
  everything else, including ``&``, ``=`` and ``/``, passes through.
  """
  return ''.join(
    quote(char, safe='') if ord(char) <= 0x20 or ord(char) >= 0x7f else char
    for char in value
  )


@dataclass(frozen=True)
class ShopDomain:
  """Canonical host of one store's admin API.

  Instances are produced by a domain resolver, which guarantees that
  ``host`` is a lowercased, syntactically valid host name.
  """

  host: str

  @property
  def base_uri(self) -> str:
    return f'https://{self.host}'

  def url_for(self, path: str, query: Optional[Sequence[Tuple[str, str]]] = None) -> str:
    """Build an absolute URL on this host.

    Query pairs are joined as ``key=value`` separated by ``&``. Values are
    not percent-encoded beyond :func:`escape_illegal_chars`, so callers
    must pass values free of raw ``&`` and ``=``.
    """
    url = f'{self.base_uri}/{path.lstrip("/")}'
    if query:
      url = f'{url}?' + '&'.join(
        f'{escape_illegal_chars(key)}={escape_illegal_chars(value)}' for key, value in query
      )
    return url

  def __str__(self) -> str:
    return self.base_uri
