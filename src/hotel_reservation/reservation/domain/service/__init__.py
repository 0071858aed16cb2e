from .availability import is_available

__all__ = ["is_available"]
