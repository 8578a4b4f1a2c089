"""Build configuration (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class BuildConfig:
    """Groups statement tree build and rendering configuration."""

    validate_invariants: bool = True
    description_limit: int = constants.DESCRIPTION_LIMIT
    description_edge: int = constants.DESCRIPTION_EDGE


DEFAULT_BUILD_CONFIG = BuildConfig()
