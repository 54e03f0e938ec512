"""Quote engines split by service family."""

from ...service_types.photography import estimate_photography
from ...service_types.video import estimate_video
from ...service_types.post_production import estimate_post_production
from ...service_types.tours import estimate_tours
from ...service_types.timelapse import estimate_timelapse

FAMILY_ENGINES = {
    "photography": estimate_photography,
    "video": estimate_video,
    "post-production": estimate_post_production,
    "360-tours": estimate_tours,
    "time-lapse": estimate_timelapse,
}

__all__ = [
    "FAMILY_ENGINES",
    "estimate_photography",
    "estimate_video",
    "estimate_post_production",
    "estimate_tours",
    "estimate_timelapse",
]
