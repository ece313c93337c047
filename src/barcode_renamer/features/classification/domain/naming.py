"""
Summary: Turn decoded symbols into a target base name per the duplicate policy.
Why: Keep the naming rule pure so it can be reasoned about without touching disk.
"""

from __future__ import annotations

from .models import DuplicatePolicy, Found

CONCATENATION_SEPARATOR = "-"


def resolve_name(found: Found, policy: DuplicatePolicy) -> str:
    """Return the base name for an image with at least one decoded symbol.

    ``PICK_FIRST`` trusts the decoder's scan order; it is stable only as long as
    the decoder reports symbols in the same order for the same input.
    ``CONCATENATE`` joins every payload in decoder order with a hyphen. Neither
    branch escapes payload text; the allocator sanitizes the result.
    """

    if policy is DuplicatePolicy.PICK_FIRST:
        return found.symbols[0].payload
    return CONCATENATION_SEPARATOR.join(symbol.payload for symbol in found.symbols)


__all__ = ["CONCATENATION_SEPARATOR", "resolve_name"]
