"""join-map exception hierarchy.

All exceptions raised by the engine itself derive from JoinMapError.
Exceptions raised by caller-supplied callables propagate unchanged.
"""

from __future__ import annotations

from join_map.core.enums import NotFoundReason


class JoinMapError(Exception):
    """Base exception for all join-map errors."""


class NotFoundError(JoinMapError):
    """Raised when map_one finds no object and a result is required."""

    def __init__(self, reason: NotFoundReason = NotFoundReason.EMPTY_RESPONSE) -> None:
        self.reason = reason
        super().__init__(reason.value)


# --- Mapping ---


class MappingError(JoinMapError):
    """Base for mapping errors."""


class StrictModeViolation(MappingError):
    """Raised in strict mode when a mapped column is missing from a row."""

    def __init__(self, map_id: str, column: str) -> None:
        self.map_id = map_id
        self.column = column
        super().__init__(f"Missing mapped column '{column}' for result map '{map_id}'")


# --- Configuration ---


class ConfigurationError(MappingError):
    """Base for result map configuration defects."""


class UnknownResultMapError(ConfigurationError):
    """Raised when a map id is not present in the registry."""

    def __init__(self, map_id: str) -> None:
        self.map_id = map_id
        super().__init__(f"Result map not found: '{map_id}'")


class DuplicateResultMapError(ConfigurationError):
    """Raised when two result maps share the same map id."""

    def __init__(self, map_id: str) -> None:
        self.map_id = map_id
        super().__init__(f"Duplicate result map id '{map_id}'")


class CyclicResultMapError(ConfigurationError):
    """Raised when associations/collections reference maps in a cycle."""

    def __init__(self, path: list[str]) -> None:
        self.path = path
        super().__init__(f"Cyclic result map reference: {' -> '.join(path)}")


class PlanCompilationError(ConfigurationError):
    """Raised when a result map definition fails validation."""
