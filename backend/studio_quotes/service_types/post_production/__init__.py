from .estimate import estimate_post_production

__all__ = [
    "estimate_post_production",
]
