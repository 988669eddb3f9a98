"""An in-memory flight catalogue with a console menu."""

__version__ = "0.1.0"
__all__ = ["flight", "repository", "service", "ui"]