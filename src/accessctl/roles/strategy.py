"""Roles – choice between one bulk group scan and per-identity lookups."""
from __future__ import annotations

from enum import Enum


class LookupStrategy(str, Enum):
    BULK = "BULK"
    FAN_OUT = "FAN_OUT"


def choose_strategy(identity_count: int, threshold: int, group_member_attribute: str | None) -> LookupStrategy:
    """Pick how a batch of identities is resolved.

    ``BULK`` needs a group → member attribute to read memberships back from
    group entries, and only pays off above *threshold* identities; everything
    else is resolved one identity at a time.
    """
    if identity_count > threshold and group_member_attribute:
        return LookupStrategy.BULK
    return LookupStrategy.FAN_OUT


__all__ = ["LookupStrategy", "choose_strategy"]
