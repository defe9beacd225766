from .source import AdminApiSource

__all__ = ["AdminApiSource"]
