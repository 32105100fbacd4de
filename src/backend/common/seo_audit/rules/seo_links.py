from __future__ import annotations

from urllib.parse import urlparse

from ..config import LinksRuleConfig
from ..context import AuditContext
from ..models import RuleOutcome, Status
from ..registry import register_rule
from ..rule import Rule

INTERNAL_PREFIXES = ("/", "./", "../", "#")


def is_external(href: str, hostname: str) -> bool:
    if not href.lower().startswith(("http://", "https://")):
        return False
    if not hostname:
        return True
    host = (urlparse(href).hostname or "").lower()
    hostname = hostname.lower()
    # Subdomains of the current host count as the same site.
    return host != hostname and not host.endswith("." + hostname)


def is_internal(href: str) -> bool:
    return href.startswith(INTERNAL_PREFIXES) and href != "#"


@register_rule
class SEO_LINKS(Rule):
    rule_id = "SEO-LINKS"
    rule_title = "Internal and external link hygiene"
    config_model = LinksRuleConfig

    def evaluate(self, ctx: AuditContext) -> RuleOutcome:
        cfg = ctx.config.get_rule_config(self.rule_id, LinksRuleConfig)
        out = self.new_outcome()
        if not cfg.enabled:
            return out

        doc = ctx.document
        hostname = doc.current_hostname()
        internal = 0
        unfollowed = 0
        external = 0
        for link in doc.query_all("a"):
            href = (doc.get_attribute(link, "href") or "").strip()
            if not href:
                continue
            if is_external(href, hostname):
                external += 1
                rel = (doc.get_attribute(link, "rel") or "").lower().split()
                if "nofollow" not in rel:
                    unfollowed += 1
            elif is_internal(href):
                internal += 1

        out.add("Internal Links", Status.INFO, f"{internal} internal links found")
        out.add("External Links", Status.INFO, f"{external} external links found")

        if unfollowed > cfg.max_external_without_nofollow:
            out.add(
                "External Link Attributes",
                Status.WARNING,
                f'{unfollowed} external links without rel="nofollow"',
                recommendation='Consider adding rel="nofollow" to external links that pass SEO value',
            )
        else:
            out.add(
                "External Link Attributes",
                Status.PASS,
                f'{unfollowed} external links without rel="nofollow" '
                f"(limit {cfg.max_external_without_nofollow})",
            )
        return out
