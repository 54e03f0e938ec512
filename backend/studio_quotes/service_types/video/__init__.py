from .estimate import estimate_video

__all__ = [
    "estimate_video",
]
