from __future__ import annotations

from typing import Optional

from ..config import HeadingsRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"


def first_level_skip(levels: list[int]) -> Optional[tuple[int, int]]:
    """Return the first (previous, current) pair that increases by more than one level."""
    for prev, cur in zip(levels, levels[1:]):
        if cur - prev > 1:
            return prev, cur
    return None


@register_rule
class SEO_HEADINGS(Rule):
    rule_id = "SEO-HEADINGS"
    rule_title = "Heading count and hierarchy"
    config_model = HeadingsRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, HeadingsRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        h1s = doc.query_all("h1")
        if not h1s:
            out.add(
                "H1 Heading",
                cfg.missing_h1_status,
                "Page has no H1 heading - critical for SEO",
                recommendation="Add a single H1 heading that describes the page",
            )
        elif len(h1s) == 1:
            text = " ".join(doc.get_text_content(h1s[0]).split())
            out.add("H1 Heading", Status.PASS, f'One H1 found: "{text[: cfg.h1_snippet_length]}..."')
        else:
            out.add(
                "H1 Heading",
                Status.WARNING,
                f"Multiple H1s found ({len(h1s)})",
                recommendation="Use only one H1 tag per page",
            )

        h2_count = len(doc.query_all("h2"))
        if h2_count > 0:
            out.add("H2 Headings", Status.PASS, f"{h2_count} H2 headings found")
        else:
            out.add(
                "H2 Headings",
                Status.WARNING,
                "No H2 headings found",
                recommendation="Add H2 headings to structure content",
            )

        levels = [_heading_level(doc.get_tag_name(h)) for h in doc.query_all(HEADING_SELECTOR)]
        levels = [lvl for lvl in levels if lvl]
        if len(levels) < 2:
            out.add("Heading Hierarchy", Status.INFO, "Not enough headings to evaluate hierarchy")
            return out

        skip = first_level_skip(levels)
        if skip is None:
            out.add("Heading Hierarchy", Status.PASS, "Heading levels follow a proper hierarchy")
        else:
            prev, cur = skip
            out.add(
                "Heading Hierarchy",
                Status.WARNING,
                f"Heading levels skip (H{prev} to H{cur})",
                recommendation="Maintain proper heading hierarchy (H1 → H2 → H3, not H1 → H3)",
            )
        return out


def _heading_level(tag_name: str) -> int:
    name = tag_name.strip().lower()
    if len(name) == 2 and name[0] == "h" and name[1] in "123456":
        return int(name[1])
    return 0
