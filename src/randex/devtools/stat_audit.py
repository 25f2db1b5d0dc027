from __future__ import annotations

import itertools
import logging
import math
from collections import Counter
from datetime import UTC, datetime
from typing import Callable, Sequence
from uuid import uuid4

from randex.contracts import AuditCheck, AuditReport, GeneratorConfig
from randex.core.engine import PcgEngine
from randex.core.errors import StatisticalIntegrityError, require_positive
from randex.distributions.sampler import Sampler

logger = logging.getLogger(__name__)

# chi-square critical values at the 0.05 significance level, keyed by degrees of freedom
CHI_SQUARE_05 = {1: 3.841, 23: 35.172, 255: 293.248}
Z_05 = 1.96


def chi_square(observed: Sequence[int], expected: float) -> float:
    return sum((count - expected) ** 2 / expected for count in observed)


def _new_report_id() -> str:
    return f"audit_{uuid4().hex[:12]}"


class StatisticalAuditService:
    """Runs the generator's statistical acceptance checks on demand."""

    def __init__(self, samples: int = 10_000, config: GeneratorConfig | None = None) -> None:
        require_positive("samples", samples)
        self.samples = samples
        self.config = config or GeneratorConfig()

    def _sampler(self, seed: int | None) -> Sampler:
        sampler = Sampler(PcgEngine(policy=self.config.increment_policy), config=self.config)
        if seed is not None:
            sampler.set_seed(seed)
        return sampler

    def run(self, *, seed: int | None = None, sampler: Sampler | None = None) -> AuditReport:
        if sampler is None:
            sampler = self._sampler(seed)
        logger.debug("statistical audit started samples=%d seed=%s", self.samples, seed)
        checks: list[Callable[[Sampler], AuditCheck]] = [
            self.check_byte_uniformity,
            self.check_bool_balance,
            self.check_int_containment,
            self.check_double_containment,
            self.check_gaussian_moments,
            self.check_gaussian_cache_steps,
            self.check_shuffle_permutations,
        ]
        results = [check(sampler) for check in checks]
        report = AuditReport(
            report_id=_new_report_id(),
            generated_at=datetime.now(UTC),
            seed=seed,
            passed=all(result.passed for result in results),
            checks=results,
        )
        logger.debug("statistical audit %s finished passed=%s", report.report_id, report.passed)
        return report

    def run_strict(self, *, seed: int | None = None, sampler: Sampler | None = None) -> AuditReport:
        report = self.run(seed=seed, sampler=sampler)
        if not report.passed:
            raise StatisticalIntegrityError(report)
        return report

    def check_byte_uniformity(self, sampler: Sampler) -> AuditCheck:
        counts = [0] * 256
        for _ in range(self.samples):
            counts[sampler.next_byte()] += 1
        statistic = chi_square(counts, self.samples / 256)
        threshold = CHI_SQUARE_05[255]
        return AuditCheck("byte_uniformity", statistic, threshold, self.samples, statistic < threshold)

    def check_bool_balance(self, sampler: Sampler) -> AuditCheck:
        trues = sum(1 for _ in range(self.samples) if sampler.next_bool())
        expected = self.samples / 2
        statistic = (trues - expected) ** 2 / expected
        threshold = CHI_SQUARE_05[1]
        return AuditCheck("bool_balance", statistic, threshold, self.samples, statistic < threshold)

    def check_int_containment(self, sampler: Sampler) -> AuditCheck:
        low, high = -1000, 5000
        outside = sum(1 for _ in range(self.samples) if not low <= sampler.next_int(low, high) < high)
        return AuditCheck(
            "int_containment", float(outside), 0.0, self.samples, outside == 0, detail=f"range [{low}, {high})"
        )

    def check_double_containment(self, sampler: Sampler) -> AuditCheck:
        outside = sum(1 for _ in range(self.samples) if not 0.0 <= sampler.next_double() < 1.0)
        return AuditCheck("double_containment", float(outside), 0.0, self.samples, outside == 0, detail="range [0, 1)")

    def check_gaussian_moments(self, sampler: Sampler) -> AuditCheck:
        values = [sampler.next_gaussian() for _ in range(self.samples)]
        n = len(values)
        mean = sum(values) / n
        variance = sum((v - mean) ** 2 for v in values) / (n - 1) if n > 1 else 1.0
        mean_z = abs(mean) * math.sqrt(n)
        variance_z = abs(variance - 1.0) / math.sqrt(2.0 / n)
        statistic = max(mean_z, variance_z)
        # two moments are tested at once, so each gets half the significance budget
        threshold = 2.24
        return AuditCheck(
            "gaussian_moments",
            statistic,
            threshold,
            n,
            statistic < threshold,
            detail=f"mean={mean:.5f} variance={variance:.5f}",
        )

    def check_gaussian_cache_steps(self, sampler: Sampler) -> AuditCheck:
        sampler.gaussian.clear()
        before = sampler.engine.steps
        sampler.next_gaussian()
        sampler.next_gaussian()
        used = sampler.engine.steps - before
        # a pair costs two unit doubles of two engine steps each; rejected pairs add multiples of four
        passed = used >= 4 and used % 4 == 0 and not sampler.gaussian.has_spare
        return AuditCheck("gaussian_cache_steps", float(used), 4.0, 2, passed)

    def check_shuffle_permutations(self, sampler: Sampler) -> AuditCheck:
        base = (0, 1, 2, 3)
        trials = max(self.samples // 4, 240)
        counts: Counter[tuple[int, ...]] = Counter()
        for _ in range(trials):
            items = list(base)
            sampler.shuffle(items)
            counts[tuple(items)] += 1
        observed = [counts[perm] for perm in itertools.permutations(base)]
        statistic = chi_square(observed, trials / len(observed))
        threshold = CHI_SQUARE_05[23]
        return AuditCheck("shuffle_permutations", statistic, threshold, trials, statistic < threshold)
