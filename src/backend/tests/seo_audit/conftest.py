import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

import pytest

from adapters.html import SoupDocument
from common.seo_audit.config import AuditConfig
from common.seo_audit.context import AuditContext
from common.seo_audit.document import NavigationTiming

GOOD_DESCRIPTION = "A" * 140

GOOD_HEAD = f"""
<meta name="google-site-verification" content="g-code">
<meta name="msvalidate.01" content="b-code">
<meta name="yandex-verification" content="y-code">
<meta name="description" content="{GOOD_DESCRIPTION}">
<meta name="viewport" content="width=device-width, initial-scale=1">
<link rel="canonical" href="https://example.com/">
<meta property="og:title" content="Example">
<meta property="og:description" content="Example page">
<meta property="og:image" content="https://example.com/og.png">
<meta name="twitter:card" content="summary_large_image">
<script type="application/ld+json">{{"@context": "https://schema.org", "@type": "LocalBusiness"}}</script>
"""

GOOD_BODY = """
<h1>Example Business</h1>
<h2>Services</h2>
<h3>Details</h3>
<img src="/a.png" alt="Storefront" width="800" height="600">
<a href="/contact" style="width: 48px; height: 48px">Contact</a>
"""


def page(head: str = "", body: str = "", body_attrs: str = "") -> str:
    return f"<!DOCTYPE html><html><head>{head}</head><body {body_attrs}>{body}</body></html>"


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def good_page() -> str:
    return page(GOOD_HEAD, GOOD_BODY)


@pytest.fixture
def make_document():
    def _make(html: str, *, hostname: str = "example.com", load_time_ms=None, **kwargs) -> SoupDocument:
        timing = None
        if load_time_ms is not None:
            timing = NavigationTiming(navigation_start=1000, load_event_end=1000 + load_time_ms)
        return SoupDocument.from_html(html, hostname=hostname, navigation_timing=timing, **kwargs)

    return _make


@pytest.fixture
def make_ctx(make_document):
    def _make(html: str, *, rules: dict | None = None, **kwargs) -> AuditContext:
        return AuditContext(
            document=make_document(html, **kwargs),
            config=AuditConfig(rules=rules or {}),
        )

    return _make
