from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Status(str, Enum):
    PASS = "pass"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def glyph(self) -> str:
        return STATUS_GLYPHS[self]

    @property
    def severity(self) -> int:
        return STATUS_SEVERITY[self]


STATUS_GLYPHS: Dict[Status, str] = {
    Status.PASS: "✅",
    Status.WARNING: "⚠️",
    Status.ERROR: "❌",
    Status.INFO: "ℹ️",
}

# Ascending severity: info < pass < warning < error.
STATUS_SEVERITY: Dict[Status, int] = {
    Status.INFO: 0,
    Status.PASS: 1,
    Status.WARNING: 2,
    Status.ERROR: 3,
}


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    status: Status
    message: str


class RuleOutcome(BaseModel):
    """Findings and annotations produced by a single rule evaluation.

    `add` appends the Finding and its annotations in one call so the `errors` and
    `recommendations` projections never need to be re-derived from `findings`.
    """

    rule_id: str = ""
    findings: List[Finding] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)

    def add(
        self,
        category: str,
        status: Status,
        message: str,
        *,
        recommendation: Optional[str] = None,
    ) -> Finding:
        finding = Finding(category=category, status=status, message=message)
        self.findings.append(finding)
        if status == Status.ERROR:
            self.errors.append(message)
        if recommendation:
            self.recommendations.append(recommendation)
        return finding

    def by_category(self, category: str) -> List[Finding]:
        return [f for f in self.findings if f.category == category]


class AuditResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    checks: Tuple[Finding, ...] = ()
    errors: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    incomplete: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warnings_count(self) -> int:
        return sum(1 for c in self.checks if c.status == Status.WARNING)

    def by_status(self, status: Status) -> List[Finding]:
        return [c for c in self.checks if c.status == status]

    def by_category(self, category: str) -> List[Finding]:
        return [c for c in self.checks if c.category == category]
