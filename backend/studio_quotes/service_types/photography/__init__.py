from .estimate import estimate_photography

__all__ = [
    "estimate_photography",
]
