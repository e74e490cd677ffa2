from clubranking.storage.json_store import JsonStore

__all__ = [
    "JsonStore",
]
