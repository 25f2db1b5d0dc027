from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntFlag
from typing import Any, MutableSequence, Protocol, Sequence


class IncrementPolicy(str, Enum):
    SEEDED = "seeded"
    AMBIENT = "ambient"


class StringOptions(IntFlag):
    LOWERCASE = 1
    UPPERCASE = 2
    NUMBERS = 4
    SPECIAL = 8

    DEFAULT = LOWERCASE | UPPERCASE | NUMBERS | SPECIAL


class RandomSource(Protocol):
    def rand(self) -> float: ...

    def randint(self, a: int, b: int) -> int: ...

    def choice(self, items: Sequence[Any]) -> Any: ...

    def shuffle(self, items: MutableSequence[Any]) -> None: ...

    def spawn(self, substream_id: str) -> RandomSource: ...


@dataclass(slots=True)
class GeneratorState:
    state: int
    increment: int


@dataclass(slots=True)
class GaussianCache:
    has_spare: bool = False
    spare: float = 0.0

    def clear(self) -> None:
        self.has_spare = False
        self.spare = 0.0


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    increment_policy: IncrementPolicy = IncrementPolicy.SEEDED
    default_string_options: StringOptions = StringOptions.DEFAULT
    max_int: int = 2**31 - 1


@dataclass(slots=True)
class AuditCheck:
    name: str
    statistic: float
    threshold: float
    samples: int
    passed: bool
    detail: str = ""


@dataclass(slots=True)
class AuditReport:
    report_id: str
    generated_at: datetime
    seed: int | None
    passed: bool
    checks: list[AuditCheck] = field(default_factory=list)

    def failed_checks(self) -> list[AuditCheck]:
        return [check for check in self.checks if not check.passed]
