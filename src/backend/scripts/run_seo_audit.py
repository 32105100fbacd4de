from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


_ensure_backend_on_path()

from adapters.html import SoupDocument  # noqa: E402
from common.seo_audit import (  # noqa: E402
    AuditConfig,
    AuditEngine,
    AuditResult,
    NavigationTiming,
    render_html,
    render_json,
    render_text,
)
from common.seo_audit.registry import registry  # noqa: E402

logger = logging.getLogger(__name__)

OUTPUT_BASE_NAME = "seo_audit"


def load_audit_config(path: Optional[Path]) -> AuditConfig:
    """Load per-rule config from a YAML or JSON file; a missing path means defaults."""
    if path is None:
        return AuditConfig()
    text = path.read_text()
    if path.suffix.lower() == ".json":
        raw: Any = json.loads(text)
    else:
        raw = yaml.safe_load(text)
    if raw is None:
        return AuditConfig()
    if isinstance(raw, dict) and "rules" not in raw:
        raw = {"rules": raw}
    config = AuditConfig.model_validate(raw)
    validate_rule_configs(config)
    return config


def validate_rule_configs(config: AuditConfig) -> None:
    """Check every configured rule id is registered and its settings fit the rule's model.

    Raises ValueError (pydantic's ValidationError included) before any rule runs.
    """
    known = set(registry.ids())
    for rule_id, values in config.rules.items():
        if rule_id not in known:
            raise ValueError(f"Unknown rule id in config: {rule_id}")
        registry.get(rule_id).config_model.model_validate(values)


def run_seo_audit_from_html(
    html: str,
    *,
    url: str = "",
    hostname: Optional[str] = None,
    load_time_ms: Optional[float] = None,
    config: Optional[AuditConfig] = None,
) -> AuditResult:
    timing = None
    if load_time_ms is not None:
        timing = NavigationTiming(navigation_start=0, load_event_end=load_time_ms)
    document = SoupDocument.from_html(html, url=url, hostname=hostname, navigation_timing=timing)
    return AuditEngine(document, config=config).run_audit()


def write_reports(result: AuditResult, output_dir: Path) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    out_json = output_dir / f"{OUTPUT_BASE_NAME}.json"
    out_md = output_dir / f"{OUTPUT_BASE_NAME}.md"
    out_html = output_dir / f"{OUTPUT_BASE_NAME}.html"
    out_json.write_text(render_json(result), encoding="utf-8")
    out_md.write_text(render_text(result), encoding="utf-8")
    out_html.write_text(render_html(result), encoding="utf-8")
    return [out_json, out_md, out_html]


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    parser = argparse.ArgumentParser(
        description="Run the SEO audit against a saved HTML page and write JSON/MD/HTML outputs."
    )
    parser.add_argument("--html", required=True, help="Path to the HTML file to audit.")
    parser.add_argument("--url", default="", help="Page URL; its host decides which links are external.")
    parser.add_argument("--hostname", default=None, help="Override the page hostname.")
    parser.add_argument(
        "--load-time-ms",
        type=float,
        default=None,
        help="Measured page load time (loadEventEnd - navigationStart) in milliseconds.",
    )
    parser.add_argument(
        "--config",
        default=os.getenv("SEO_AUDIT_CONFIG") or None,
        help="YAML/JSON per-rule config (defaults to $SEO_AUDIT_CONFIG).",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Write seo_audit.json/.md/.html here. Without it, one format is printed to stdout.",
    )
    parser.add_argument(
        "--format",
        choices=("json", "text", "html"),
        default="text",
        help="Format printed to stdout when --output-dir is not given (default: text).",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv("SEO_AUDIT_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $SEO_AUDIT_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    html_path = Path(args.html).resolve()
    if not html_path.exists():
        raise SystemExit(f"HTML file not found: {html_path}")
    try:
        config = load_audit_config(Path(args.config).resolve() if args.config else None)
    except ValueError as exc:
        raise SystemExit(f"Invalid rule config: {exc}") from exc

    logger.info("Auditing %s", html_path)
    result = run_seo_audit_from_html(
        html_path.read_text(encoding="utf-8", errors="replace"),
        url=args.url,
        hostname=args.hostname,
        load_time_ms=args.load_time_ms,
        config=config,
    )

    if args.output_dir:
        for path in write_reports(result, Path(args.output_dir).resolve()):
            print(f"Wrote {path}")
    elif args.format == "json":
        print(render_json(result))
    elif args.format == "html":
        print(render_html(result))
    else:
        print(render_text(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
