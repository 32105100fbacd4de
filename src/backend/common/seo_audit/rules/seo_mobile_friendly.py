from __future__ import annotations

from ..config import MobileFriendlyRuleConfig
from ..context import AuditContext, parse_px
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule


@register_rule
class SEO_MOBILE_FRIENDLY(Rule):
    rule_id = "SEO-MOBILE-FRIENDLY"
    rule_title = "Mobile viewport, font size and touch targets"
    config_model = MobileFriendlyRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, MobileFriendlyRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        viewport = ctx.attribute('meta[name="viewport"]', "content") or ""
        if "width=device-width" in viewport.replace(" ", "").lower():
            out.add("Mobile Responsive", Status.PASS, "Viewport configured for mobile devices")
        else:
            out.add(
                "Mobile Responsive",
                Status.ERROR,
                "Mobile viewport not properly configured - critical for mobile SEO",
            )

        body = ctx.query_one("body")
        font_size = doc.get_computed_style(body, "font-size") if body is not None else ""
        size_px = parse_px(font_size)
        if size_px is None:
            out.add(
                "Font Size",
                Status.WARNING,
                "Base font size could not be determined",
                recommendation=f"Set an explicit base font size of at least {cfg.min_font_size_px:g}px",
            )
        elif size_px >= cfg.min_font_size_px:
            out.add("Font Size", Status.PASS, f"Base font size: {font_size} (mobile-friendly)")
        else:
            out.add(
                "Font Size",
                Status.WARNING,
                f"Base font size: {font_size} (consider increasing to {cfg.min_font_size_px:g}px for mobile)",
            )

        min_px = cfg.min_touch_target_px
        small = 0
        for target in doc.query_all(cfg.touch_target_selector):
            geom = doc.get_bounding_geometry(target)
            if geom.width < min_px or geom.height < min_px:
                small += 1
        if small:
            out.add(
                "Touch Targets",
                Status.WARNING,
                f"{small} elements smaller than {min_px:g}x{min_px:g}px (harder to tap on mobile)",
                recommendation=(
                    f"Increase touch target sizes to at least {min_px:g}x{min_px:g}px for better mobile usability"
                ),
            )
        else:
            out.add("Touch Targets", Status.PASS, "All touch targets are appropriately sized")
        return out
