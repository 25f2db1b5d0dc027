from .api import (
    byte_color,
    date_time,
    enum_member,
    geo_coordinate,
    hex_color,
    next_bool,
    next_byte,
    next_bytes,
    next_char,
    next_double,
    next_element,
    next_float,
    next_gaussian,
    next_int,
    next_string,
    set_seed,
    shuffle,
)
from .contracts import GeneratorConfig, IncrementPolicy, StringOptions
from .core import InvalidArgumentError, NullReferenceError, PcgEngine, PcgRandomSource, seeded_random
from .distributions import Sampler

__version__ = "1.0.0"

__all__ = [
    "GeneratorConfig",
    "IncrementPolicy",
    "InvalidArgumentError",
    "NullReferenceError",
    "PcgEngine",
    "PcgRandomSource",
    "Sampler",
    "StringOptions",
    "byte_color",
    "date_time",
    "enum_member",
    "geo_coordinate",
    "hex_color",
    "next_bool",
    "next_byte",
    "next_bytes",
    "next_char",
    "next_double",
    "next_element",
    "next_float",
    "next_gaussian",
    "next_int",
    "next_string",
    "seeded_random",
    "set_seed",
    "shuffle",
]
