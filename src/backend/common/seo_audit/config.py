from __future__ import annotations

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, Field

from .models import Status

T = TypeVar("T", bound=BaseModel)


class RuleConfigBase(BaseModel):
    enabled: bool = True


class VerificationTagsRuleConfig(RuleConfigBase):
    google_meta_name: str = "google-site-verification"
    bing_meta_name: str = "msvalidate.01"
    yandex_meta_name: str = "yandex-verification"


class MetaTagsRuleConfig(RuleConfigBase):
    # Inclusive bounds for a well-sized search snippet.
    description_min_length: int = 120
    description_max_length: int = 160


class HeadingsRuleConfig(RuleConfigBase):
    h1_snippet_length: int = 50
    # Status for a page with no H1 at all; multiple H1s are always a warning.
    missing_h1_status: Status = Status.ERROR


class ImagesRuleConfig(RuleConfigBase):
    oversized_px: int = 2000


class LinksRuleConfig(RuleConfigBase):
    # Warn only when strictly more external links than this lack rel="nofollow".
    max_external_without_nofollow: int = 10


class StructuredDataRuleConfig(RuleConfigBase):
    script_selector: str = 'script[type="application/ld+json"]'


class PerformanceRuleConfig(RuleConfigBase):
    max_load_time_ms: int = 3000


class MobileFriendlyRuleConfig(RuleConfigBase):
    min_font_size_px: float = 16
    min_touch_target_px: float = 44
    touch_target_selector: str = "a, button"


class AuditConfig(BaseModel):
    """Per-run configuration for all rules.

    Rules pull their typed config via `get_rule_config`.
    """

    rules: Dict[str, Dict[str, Any]] = Field(default_factory=dict)

    def get_rule_config(
        self,
        rule_id: str,
        model: Type[T],
        default: Optional[T] = None,
    ) -> T:
        if rule_id not in self.rules:
            if default is not None:
                return default
            return model()  # type: ignore[call-arg]
        raw = self.rules.get(rule_id, {})
        return model.model_validate(raw)
