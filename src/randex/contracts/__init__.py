from .types import (
    AuditCheck,
    AuditReport,
    GaussianCache,
    GeneratorConfig,
    GeneratorState,
    IncrementPolicy,
    RandomSource,
    StringOptions,
)

__all__ = [
    "AuditCheck",
    "AuditReport",
    "GaussianCache",
    "GeneratorConfig",
    "GeneratorState",
    "IncrementPolicy",
    "RandomSource",
    "StringOptions",
]
