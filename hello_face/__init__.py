"""Face detection and embedding primitives, with preview, caching, settings and launcher helpers."""

__version__ = "0.1.0"