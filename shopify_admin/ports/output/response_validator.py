"""Output port for response validation."""
from __future__ import annotations

from typing import Callable

from shopify_admin.domain.value_objects.http_request import ResponseDescriptor

# Returns normally on success, raises ApiRequestError otherwise.
ResponseValidator = Callable[[ResponseDescriptor], None]
