from __future__ import annotations

from randex.contracts import AuditReport


class InvalidArgumentError(ValueError):
    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{argument}: {message}")
        self.argument = argument


class NullReferenceError(TypeError):
    def __init__(self, argument: str, message: str | None = None) -> None:
        super().__init__(f"{argument}: {message or 'value must not be None'}")
        self.argument = argument


class StatisticalIntegrityError(RuntimeError):
    def __init__(self, report: AuditReport) -> None:
        names = ", ".join(check.name for check in report.failed_checks())
        super().__init__(f"statistical audit {report.report_id} failed: {names}")
        self.report = report


def require_positive(argument: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(argument, f"expected an integer, got {type(value).__name__}")
    if value <= 0:
        raise InvalidArgumentError(argument, f"must be greater than zero, got {value}")


def require_ordered(min_argument: str, min_value: object, max_value: object) -> None:
    if min_value >= max_value:  # type: ignore[operator]
        raise InvalidArgumentError(min_argument, f"{min_value!r} must be less than {max_value!r}")
