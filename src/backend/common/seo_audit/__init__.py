"""Rule-based SEO audit engine.

This package intentionally contains only domain logic:
- Rule input is a read-only document accessor + per-rule config.
- No network, file or browser access lives here.
"""

from .config import AuditConfig
from .context import AuditContext
from .document import DocumentAccessError, DocumentAccessor, Geometry, NavigationTiming
from .models import AuditResult, Finding, RuleOutcome, Status
from .report import render_html, render_json, render_text
from .runner import AuditEngine, AuditFailedError, run_audit

# Import built-in rules so they self-register with the global registry.
from . import rules as _builtin_rules  # noqa: F401
