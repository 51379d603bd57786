"""Failures raised while generating or transitioning between locations."""
from __future__ import annotations


class GenerationFailure(RuntimeError):
    """An entity could not be built; nothing partially built is kept."""


class InconsistentStateFailure(RuntimeError):
    """The exploration state no longer matches the entities it references."""


__all__ = ["GenerationFailure", "InconsistentStateFailure"]
