from __future__ import annotations

from ..config import ImagesRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule


@register_rule
class SEO_IMAGES(Rule):
    rule_id = "SEO-IMAGES"
    rule_title = "Image alt text and dimensions"
    config_model = ImagesRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, ImagesRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        images = doc.query_all("img")
        if not images:
            out.add("Images", Status.INFO, "No images found on page")
            return out

        # Missing attribute and whitespace-only alt text are both issues.
        missing_alt = sum(1 for img in images if not (doc.get_attribute(img, "alt") or "").strip())
        if missing_alt == 0:
            out.add("Image Alt Text", Status.PASS, f"All {len(images)} images have alt attributes")
        else:
            out.add(
                "Image Alt Text",
                Status.WARNING,
                f"{missing_alt}/{len(images)} images missing or have empty alt text",
                recommendation="Add descriptive alt text to all images for accessibility and SEO",
            )

        oversized = 0
        for img in images:
            geom = doc.get_bounding_geometry(img)
            if geom.width > cfg.oversized_px or geom.height > cfg.oversized_px:
                oversized += 1
        if oversized:
            out.add(
                "Image Size",
                Status.WARNING,
                f"{oversized} images may be oversized (>{cfg.oversized_px}px)",
                recommendation="Optimize large images to improve page load speed",
            )
        else:
            out.add("Image Size", Status.PASS, f"No images larger than {cfg.oversized_px}px")
        return out
