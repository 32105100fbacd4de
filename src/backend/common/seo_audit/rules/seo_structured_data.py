from __future__ import annotations

import json
from typing import Any

from ..config import StructuredDataRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule

CATEGORY = "Structured Data (JSON-LD)"

# Nesting beyond this is not walked; real JSON-LD stays a few levels deep.
MAX_SCHEMA_DEPTH = 32


def count_valid_schemas(data: Any, context: Any = None, depth: int = 0) -> int:
    """Count JSON-LD nodes carrying both a context and a type.

    Array members and `@graph` members are inspected too, inheriting the enclosing `@context`.
    Nodes nested deeper than MAX_SCHEMA_DEPTH are not counted.
    """
    if depth > MAX_SCHEMA_DEPTH:
        return 0
    if isinstance(data, list):
        return sum(count_valid_schemas(item, context, depth + 1) for item in data)
    if not isinstance(data, dict):
        return 0
    context = data.get("@context") or context
    count = 1 if context and data.get("@type") else 0
    graph = data.get("@graph")
    if isinstance(graph, list):
        count += count_valid_schemas(graph, context, depth + 1)
    return count


@register_rule
class SEO_STRUCTURED_DATA(Rule):
    rule_id = "SEO-STRUCTURED-DATA"
    rule_title = "JSON-LD structured data"
    config_model = StructuredDataRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, StructuredDataRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        blocks = doc.query_all(cfg.script_selector)
        if not blocks:
            out.add(
                CATEGORY,
                Status.WARNING,
                "No JSON-LD structured data found",
                recommendation="Add JSON-LD structured data (schema.org) for rich search results",
            )
            return out

        valid = 0
        malformed = 0
        for index, block in enumerate(blocks, start=1):
            try:
                data = json.loads(doc.get_text_content(block))
            except json.JSONDecodeError as exc:
                malformed += 1
                out.add(
                    CATEGORY,
                    Status.ERROR,
                    f"Invalid JSON-LD syntax in block {index}: {exc.msg} (line {exc.lineno}, column {exc.colno})",
                )
                continue
            except RecursionError:
                malformed += 1
                out.add(
                    CATEGORY,
                    Status.ERROR,
                    f"Invalid JSON-LD in block {index}: nesting too deep to parse",
                )
                continue
            valid += count_valid_schemas(data)

        if valid > 0:
            out.add(CATEGORY, Status.PASS, f"{valid} valid schema(s) found")
        elif malformed < len(blocks):
            out.add(
                CATEGORY,
                Status.WARNING,
                "JSON-LD found but no item declares both @context and @type",
                recommendation='Declare "@context": "https://schema.org" and an "@type" in each JSON-LD block',
            )
        return out
