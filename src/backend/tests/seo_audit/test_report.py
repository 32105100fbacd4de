import json

from common.seo_audit.models import AuditResult, Finding, Status
from common.seo_audit.report import render_html, render_json, render_text, score_tier


def _result(score: int = 72) -> AuditResult:
    return AuditResult(
        score=score,
        checks=[
            Finding(category="Meta Description", status=Status.ERROR, message="Meta description tag is missing"),
            Finding(category="Canonical URL", status=Status.WARNING, message="Missing canonical link tag"),
            Finding(category="H1 Heading", status=Status.PASS, message='One H1 found: "<Shop> & Co..."'),
            Finding(category="Images", status=Status.INFO, message="No images found on page"),
        ],
        errors=["Meta description tag is missing"],
        recommendations=["Add canonical link to prevent duplicate content issues"],
    )


def test_json_is_lossless():
    result = _result()
    payload = json.loads(render_json(result))
    assert payload["score"] == 72
    assert payload["checks"][0] == {
        "category": "Meta Description",
        "status": "error",
        "message": "Meta description tag is missing",
    }
    assert payload["errors"] == list(result.errors)
    assert payload["recommendations"] == list(result.recommendations)
    assert payload["warnings_count"] == 1
    assert payload["incomplete"] is False
    assert AuditResult.model_validate(
        {k: v for k, v in payload.items() if k != "warnings_count"}
    ) == result


def test_text_sections_in_order_with_glyphs():
    text = render_text(_result())
    score_at = text.index("Overall SEO Score: 72/100")
    errors_at = text.index("CRITICAL ISSUES")
    recs_at = text.index("RECOMMENDATIONS")
    checks_at = text.index("DETAILED CHECKS")
    assert score_at < errors_at < recs_at < checks_at
    assert "   1. Meta description tag is missing" in text
    assert "❌ Meta Description: Meta description tag is missing" in text
    assert "⚠️ Canonical URL: Missing canonical link tag" in text
    assert "✅ H1 Heading:" in text
    assert "ℹ️ Images: No images found on page" in text


def test_status_severity_is_totally_ordered():
    ordered = sorted(Status, key=lambda s: s.severity)
    assert ordered == [Status.INFO, Status.PASS, Status.WARNING, Status.ERROR]
    assert len({s.severity for s in Status}) == len(Status)


def test_text_omits_empty_sections():
    text = render_text(AuditResult(score=100, checks=[Finding(category="A", status=Status.PASS, message="ok")]))
    assert "CRITICAL ISSUES" not in text
    assert "RECOMMENDATIONS" not in text


def test_html_fragment_structure_and_escaping():
    fragment = render_html(_result())
    assert fragment.startswith("<div class='seo-audit-report'>")
    assert "<div class='score fair'>72</div>" in fragment
    assert "<div class='section errors'>" in fragment
    assert "Critical Issues (1)" in fragment
    assert "<div class='section recommendations'>" in fragment
    assert "<div class='section checks'>" in fragment
    assert "&lt;Shop&gt; &amp; Co" in fragment
    assert "<Shop>" not in fragment
    assert "<li class='status-warning'>" in fragment


def test_score_tiers():
    assert score_tier(80) == "good"
    assert score_tier(79) == "fair"
    assert score_tier(50) == "fair"
    assert score_tier(49) == "poor"
    assert "class='score poor'" in render_html(_result(score=10))


def test_renderers_do_not_rescore():
    result = _result(score=3)
    assert json.loads(render_json(result))["score"] == 3
    assert "3/100" in render_text(result)
