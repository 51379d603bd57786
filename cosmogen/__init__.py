"""Seed-driven universe generation with a lazily materialised exploration state."""
from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
