from .config import config_from_env, config_from_mapping, default_config, load_config, validate_config
from .context import ContextRegistry, current_sampler, default_registry
from .engine import MULTIPLIER, PcgEngine, rotate_right32
from .errors import InvalidArgumentError, NullReferenceError, StatisticalIntegrityError
from .randomness import PcgRandomSource, ambient_random, seeded_random
from .seeding import ambient_increment, generate_seed, seeded_increment

__all__ = [
    "ContextRegistry",
    "InvalidArgumentError",
    "MULTIPLIER",
    "NullReferenceError",
    "PcgEngine",
    "PcgRandomSource",
    "StatisticalIntegrityError",
    "ambient_increment",
    "ambient_random",
    "config_from_env",
    "config_from_mapping",
    "current_sampler",
    "default_config",
    "default_registry",
    "generate_seed",
    "load_config",
    "rotate_right32",
    "seeded_increment",
    "seeded_random",
    "validate_config",
]
