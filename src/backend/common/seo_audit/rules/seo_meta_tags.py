from __future__ import annotations

from ..config import MetaTagsRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule

OPEN_GRAPH_PROPERTIES = ("og:title", "og:description", "og:image")


@register_rule
class SEO_META_TAGS(Rule):
    rule_id = "SEO-META-TAGS"
    rule_title = "Meta description, viewport, canonical and social tags"
    config_model = MetaTagsRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, MetaTagsRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        self._check_description(ctx, cfg, out)

        if ctx.query_one('meta[name="viewport"]') is not None:
            out.add("Meta Viewport", Status.PASS, "Viewport meta tag present for mobile responsiveness")
        else:
            out.add(
                "Meta Viewport",
                Status.ERROR,
                "Viewport meta tag is missing - critical for mobile SEO",
            )

        canonical = ctx.query_one('link[rel="canonical"]')
        if canonical is not None:
            href = ctx.document.get_attribute(canonical, "href") or ""
            out.add("Canonical URL", Status.PASS, f"Canonical: {href}")
        else:
            out.add(
                "Canonical URL",
                Status.WARNING,
                "Missing canonical link tag",
                recommendation="Add canonical link to prevent duplicate content issues",
            )

        missing = [p for p in OPEN_GRAPH_PROPERTIES if ctx.query_one(f'meta[property="{p}"]') is None]
        if not missing:
            out.add("Open Graph Tags", Status.PASS, "All required OG tags present")
        else:
            out.add(
                "Open Graph Tags",
                Status.WARNING,
                f"Missing: {', '.join(missing)}",
                recommendation="Add missing Open Graph tags for better social media sharing",
            )

        if ctx.query_one('meta[name="twitter:card"]') is not None:
            out.add("Twitter Card", Status.PASS, "Twitter Card tag present")
        else:
            out.add(
                "Twitter Card",
                Status.WARNING,
                "Missing Twitter Card tag",
                recommendation="Add Twitter Card meta tags for better Twitter sharing",
            )

        return out

    def _check_description(self, ctx: AuditContext, cfg: MetaTagsRuleConfig, out: RuleOutcome) -> None:
        tag = ctx.query_one('meta[name="description"]')
        if tag is None:
            out.add(
                "Meta Description",
                Status.ERROR,
                "Meta description tag is missing",
            )
            return

        length = len(ctx.document.get_attribute(tag, "content") or "")
        optimal = f"optimal: {cfg.description_min_length}-{cfg.description_max_length}"
        if cfg.description_min_length <= length <= cfg.description_max_length:
            out.add("Meta Description", Status.PASS, f"Length: {length} characters ({optimal})")
        elif length > 0:
            out.add(
                "Meta Description",
                Status.WARNING,
                f"Length: {length} characters ({optimal})",
                recommendation=(
                    f"Optimize meta description length to {cfg.description_min_length}-"
                    f"{cfg.description_max_length} characters for better search result snippets"
                ),
            )
        else:
            out.add(
                "Meta Description",
                Status.ERROR,
                "Meta description is empty",
            )
