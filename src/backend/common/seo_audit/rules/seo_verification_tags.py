from __future__ import annotations

from ..config import VerificationTagsRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule


@register_rule
class SEO_VERIFICATION_TAGS(Rule):
    rule_id = "SEO-VERIFICATION-TAGS"
    rule_title = "Search engine verification meta tags"
    config_model = VerificationTagsRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, VerificationTagsRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        if ctx.query_one(f'meta[name="{cfg.google_meta_name}"]') is not None:
            out.add("Google Verification", Status.PASS, "Google verification meta tag found")
        else:
            out.add(
                "Google Verification",
                Status.INFO,
                "Google verification meta tag not found (optional if using file method)",
            )

        if ctx.query_one(f'meta[name="{cfg.bing_meta_name}"]') is not None:
            out.add("Bing Verification", Status.PASS, "Bing verification meta tag found")
        else:
            out.add(
                "Bing Verification",
                Status.WARNING,
                "Bing verification meta tag not found",
                recommendation=(
                    f'Add Bing Webmaster verification: <meta name="{cfg.bing_meta_name}" content="YOUR_CODE">'
                ),
            )

        if ctx.query_one(f'meta[name="{cfg.yandex_meta_name}"]') is not None:
            out.add("Yandex Verification", Status.PASS, "Yandex verification meta tag found")
        else:
            out.add("Yandex Verification", Status.INFO, "Yandex verification not configured")

        return out
