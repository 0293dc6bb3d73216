from domain.models.track import Track

__all__ = ["Track"]
