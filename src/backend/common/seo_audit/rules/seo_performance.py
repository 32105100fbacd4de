from __future__ import annotations

from ..config import PerformanceRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule


@register_rule
class SEO_PERFORMANCE(Rule):
    rule_id = "SEO-PERFORMANCE"
    rule_title = "Page load time and resource counts"
    config_model = PerformanceRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, PerformanceRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        timing = doc.get_navigation_timing()
        # A non-positive load time means the load event has not fired yet.
        if timing is not None and timing.load_time_ms > 0:
            seconds = timing.load_time_ms / 1000
            if timing.load_time_ms < cfg.max_load_time_ms:
                out.add("Page Load Time", Status.PASS, f"Load time: {seconds:.2f}s (good)")
            else:
                out.add(
                    "Page Load Time",
                    Status.WARNING,
                    f"Load time: {seconds:.2f}s (consider optimizing)",
                    recommendation="Optimize page load time for better user experience and SEO",
                )

        scripts = len(doc.query_all("script[src]"))
        stylesheets = len(doc.query_all('link[rel="stylesheet"]'))
        out.add("Resources", Status.INFO, f"{scripts} external scripts, {stylesheets} stylesheets")
        return out
