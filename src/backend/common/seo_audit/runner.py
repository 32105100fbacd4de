from __future__ import annotations

import logging
from typing import Iterable, Optional

from .config import AuditConfig
from .context import AuditContext
from .document import DocumentAccessError, DocumentAccessor
from .models import AuditResult, Finding, RuleOutcome, Status
from .registry import registry
from .scoring import calculate_score

logger = logging.getLogger(__name__)

DOCUMENT_ACCESS_CATEGORY = "Document Access"
INCOMPLETE_AUDIT_ERROR = "No checks were evaluated; audit incomplete"


class AuditFailedError(RuntimeError):
    """Every rule failed because the document could not be queried."""


class AuditEngine:
    """Runs the registered rules against one document snapshot.

    Construct one engine per run; `run_audit` is not re-entrant on a shared instance.
    """

    def __init__(
        self,
        document: DocumentAccessor,
        *,
        config: Optional[AuditConfig] = None,
        rules: Optional[Iterable] = None,
    ):
        self._ctx = AuditContext(document=document, config=config or AuditConfig())
        self._rules = list(rules) if rules is not None else registry.create_all()

    def run_audit(self, *, rule_ids: Optional[set[str]] = None) -> AuditResult:
        checks: list[Finding] = []
        errors: list[str] = []
        recommendations: list[str] = []
        ran = 0
        access_failures = 0
        last_access_error: Optional[DocumentAccessError] = None

        for rule in self._rules:
            if rule_ids is not None and rule.rule_id not in rule_ids:
                continue
            ran += 1
            logger.debug("Running rule %s", rule.rule_id)
            try:
                outcome = rule.evaluate(self._ctx)
            except DocumentAccessError as exc:
                logger.warning("Rule %s could not read the document: %s", rule.rule_id, exc)
                access_failures += 1
                last_access_error = exc
                outcome = RuleOutcome(rule_id=rule.rule_id)
                outcome.add(
                    DOCUMENT_ACCESS_CATEGORY,
                    Status.ERROR,
                    f"{rule.rule_title}: document could not be read ({exc})",
                )
            checks.extend(outcome.findings)
            errors.extend(outcome.errors)
            recommendations.extend(outcome.recommendations)

        if ran and access_failures == ran:
            raise AuditFailedError(
                f"Document could not be queried by any rule: {last_access_error}"
            ) from last_access_error

        breakdown = calculate_score(checks)
        if breakdown.degenerate:
            logger.warning("Audit produced no findings; reporting score 0 as incomplete.")
            errors.append(INCOMPLETE_AUDIT_ERROR)

        return AuditResult(
            score=breakdown.score,
            checks=tuple(checks),
            errors=tuple(errors),
            recommendations=tuple(recommendations),
            incomplete=breakdown.degenerate,
        )


def run_audit(
    document: DocumentAccessor,
    *,
    config: Optional[AuditConfig] = None,
    rule_ids: Optional[set[str]] = None,
) -> AuditResult:
    return AuditEngine(document, config=config).run_audit(rule_ids=rule_ids)
