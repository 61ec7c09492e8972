"""Mapper configuration.

MapperOptions is a Pydantic model for type-safe, per-call engine options.
Nothing is read from the environment or kept globally.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class MapperOptions(BaseModel):
    """Options controlling how rows are merged into the object graph."""

    model_config = ConfigDict(frozen=True)

    strict: bool = False
    skip_null_identities: bool = False
    overwrite_falsy: bool = False
    detect_cycles: bool = True


DEFAULT_OPTIONS = MapperOptions()
