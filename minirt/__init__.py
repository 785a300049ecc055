"""Scene model, linked-list utilities and console formatting for a small ray tracer."""

__version__ = "0.1.0"
__all__ = ["linkedlist", "listops", "scene", "console"]