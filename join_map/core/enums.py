"""Error reason enumeration."""

from __future__ import annotations

from enum import Enum


class NotFoundReason(Enum):
    """Symbolic reasons carried by NotFoundError."""

    EMPTY_RESPONSE = "EmptyResponse"
