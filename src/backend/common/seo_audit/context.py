from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional

from .config import AuditConfig
from .document import DocumentAccessor


@dataclass(frozen=True)
class AuditContext:
    document: DocumentAccessor
    config: AuditConfig = field(default_factory=AuditConfig)

    def query_one(self, selector: str) -> Optional[Any]:
        matches = self.document.query_all(selector)
        return matches[0] if matches else None

    def attribute(self, selector: str, name: str) -> Optional[str]:
        element = self.query_one(selector)
        if element is None:
            return None
        return self.document.get_attribute(element, name)


def round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_px(value: Optional[str]) -> Optional[float]:
    """Parse a CSS length such as "16px" or "16" into a float; None when unparseable."""
    if value is None:
        return None
    text = value.strip().lower()
    if text.endswith("px"):
        text = text[:-2].strip()
    try:
        return float(text)
    except ValueError:
        return None
