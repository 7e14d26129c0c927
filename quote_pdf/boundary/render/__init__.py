"""
Render engine boundary.

Exports: PlaywrightEngine, playwright_engine_factory
"""

from .playwright_engine import PlaywrightEngine, playwright_engine_factory

__all__ = ["PlaywrightEngine", "playwright_engine_factory"]
