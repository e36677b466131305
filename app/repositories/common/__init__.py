from app.repositories.common.kv import KeyValueRepository

__all__ = ["KeyValueRepository"]
