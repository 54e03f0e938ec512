from .estimate import estimate_tours

__all__ = [
    "estimate_tours",
]
