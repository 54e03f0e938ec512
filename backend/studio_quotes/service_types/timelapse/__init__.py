from .estimate import estimate_timelapse

__all__ = [
    "estimate_timelapse",
]
