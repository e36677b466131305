from app.repositories.registry.photo import PhotoRepository, photo_digest

__all__ = ["PhotoRepository", "photo_digest"]
