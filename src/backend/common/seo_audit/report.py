from __future__ import annotations

import html as html_lib
import json

from .models import AuditResult

RULE = "=" * 60


def score_tier(score: int) -> str:
    if score >= 80:
        return "good"
    if score >= 50:
        return "fair"
    return "poor"


def render_json(result: AuditResult) -> str:
    return json.dumps(result.model_dump(mode="json"), indent=2, ensure_ascii=False)


def render_text(result: AuditResult) -> str:
    lines = [
        RULE,
        "🔍 SEO AUDIT REPORT",
        RULE,
        "",
        f"📊 Overall SEO Score: {result.score}/100",
    ]
    if result.incomplete:
        lines.append("(audit incomplete: no checks were evaluated)")
    lines.append("")

    if result.errors:
        lines.append("❌ CRITICAL ISSUES:")
        lines.extend(f"   {i}. {err}" for i, err in enumerate(result.errors, start=1))
        lines.append("")

    if result.recommendations:
        lines.append("💡 RECOMMENDATIONS:")
        lines.extend(f"   {i}. {rec}" for i, rec in enumerate(result.recommendations, start=1))
        lines.append("")

    lines.append("📋 DETAILED CHECKS:")
    for check in result.checks:
        lines.append(f"   {check.status.glyph} {check.category}: {check.message}")
    lines.append("")
    lines.append(RULE)
    return "\n".join(lines)


def render_html(result: AuditResult) -> str:
    def _escape(value: object) -> str:
        return html_lib.escape(str(value))

    def _list(items: list[str]) -> str:
        return "".join(f"<li>{item}</li>" for item in items)

    tier = score_tier(result.score)
    lines = [
        "<div class='seo-audit-report'>",
        "<h2>🔍 SEO Audit Report</h2>",
        "<div class='score-box'>",
        f"<div class='score {tier}'>{result.score}</div>",
        "<span>Overall SEO Score</span>",
        "</div>",
    ]

    if result.errors:
        lines.extend(
            [
                "<div class='section errors'>",
                f"<h3>❌ Critical Issues ({len(result.errors)})</h3>",
                f"<ul>{_list([_escape(err) for err in result.errors])}</ul>",
                "</div>",
            ]
        )

    if result.recommendations:
        lines.extend(
            [
                "<div class='section recommendations'>",
                f"<h3>💡 Recommendations ({len(result.recommendations)})</h3>",
                f"<ul>{_list([_escape(rec) for rec in result.recommendations])}</ul>",
                "</div>",
            ]
        )

    checks = [
        f"<li class='status-{check.status.value}'>"
        f"<strong>{check.status.glyph} {_escape(check.category)}:</strong> {_escape(check.message)}</li>"
        for check in result.checks
    ]
    lines.extend(
        [
            "<div class='section checks'>",
            "<h3>📋 Detailed Checks</h3>",
            f"<ul>{''.join(checks)}</ul>",
            "</div>",
            "</div>",
        ]
    )
    return "\n".join(lines)
