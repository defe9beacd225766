from .admin_api import AdminApiSource

__all__ = ["AdminApiSource"]
