"""Storage adapters implementing the repository interfaces."""

from .json_storage import JsonStorage, default_storage_path

__all__ = ["JsonStorage", "default_storage_path"]
