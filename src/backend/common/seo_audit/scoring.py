from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from .context import round_half_up
from .models import Finding, Status

ERROR_PENALTY = 10
WARNING_PENALTY = 5


@dataclass(frozen=True)
class ScoreBreakdown:
    total: int
    passed: int
    warnings: int
    errors: int
    score: int

    @property
    def degenerate(self) -> bool:
        return self.total == 0


def calculate_score(findings: Iterable[Finding]) -> ScoreBreakdown:
    """Reduce Findings to a 0-100 score.

    round(100 * passed / total) - 10 per error - 5 per warning, clamped to [0, 100].
    `info` Findings count toward the total only. With no Findings the score is 0 and the
    breakdown reports itself as degenerate.
    """
    findings = list(findings)
    total = len(findings)
    passed = sum(1 for f in findings if f.status == Status.PASS)
    warnings = sum(1 for f in findings if f.status == Status.WARNING)
    errors = sum(1 for f in findings if f.status == Status.ERROR)

    if total == 0:
        return ScoreBreakdown(total=0, passed=0, warnings=0, errors=0, score=0)

    score = round_half_up(Decimal(100 * passed) / Decimal(total))
    score -= errors * ERROR_PENALTY
    score -= warnings * WARNING_PENALTY
    score = max(0, min(100, score))
    return ScoreBreakdown(total=total, passed=passed, warnings=warnings, errors=errors, score=score)
