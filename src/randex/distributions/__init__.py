from .charsets import CHARACTER_SETS, character_pool
from .derived import byte_color, date_time, enum_member, geo_coordinate, hex_color
from .sampler import MAX_FLOAT, Sampler

__all__ = [
    "CHARACTER_SETS",
    "MAX_FLOAT",
    "Sampler",
    "byte_color",
    "character_pool",
    "date_time",
    "enum_member",
    "geo_coordinate",
    "hex_color",
]
