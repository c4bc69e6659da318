"""Product records as consumed by scoring."""

from .mapper import ProductPayloadMapper
from .models import ProductPayload

__all__ = [
    "ProductPayloadMapper",
    "ProductPayload",
]
