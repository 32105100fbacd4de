from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Type

from pydantic import BaseModel

from .context import AuditContext
from .models import RuleOutcome


class Rule(ABC):
    rule_id: str
    rule_title: str
    config_model: Type[BaseModel]

    def __init__(self):
        if not getattr(self, "rule_id", None):
            raise ValueError("Rule must define rule_id")

    def new_outcome(self) -> RuleOutcome:
        return RuleOutcome(rule_id=self.rule_id)

    @abstractmethod
    def evaluate(self, ctx: AuditContext) -> RuleOutcome:  # pragma: no cover
        raise NotImplementedError
