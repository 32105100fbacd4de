import json

import pytest
from pydantic import ValidationError

from scripts.run_seo_audit import load_audit_config, main, run_seo_audit_from_html


def test_run_from_html_uses_load_time(good_page):
    result = run_seo_audit_from_html(good_page, url="https://example.com/", load_time_ms=4500)
    load = result.by_category("Page Load Time")
    assert load[0].status.value == "warning"


def test_load_config_yaml_with_and_without_rules_key(tmp_path):
    flat = tmp_path / "flat.yaml"
    flat.write_text("SEO-LINKS:\n  max_external_without_nofollow: 3\n")
    nested = tmp_path / "nested.json"
    nested.write_text(json.dumps({"rules": {"SEO-IMAGES": {"enabled": False}}}))
    empty = tmp_path / "empty.yaml"
    empty.write_text("")

    assert load_audit_config(flat).rules == {"SEO-LINKS": {"max_external_without_nofollow": 3}}
    assert load_audit_config(nested).rules == {"SEO-IMAGES": {"enabled": False}}
    assert load_audit_config(empty).rules == {}
    assert load_audit_config(None).rules == {}


def test_main_writes_all_reports(tmp_path, good_page, capsys):
    html_path = tmp_path / "page.html"
    html_path.write_text(good_page, encoding="utf-8")
    out_dir = tmp_path / "out"

    assert main(["--html", str(html_path), "--url", "https://example.com/", "--output-dir", str(out_dir)]) == 0

    payload = json.loads((out_dir / "seo_audit.json").read_text(encoding="utf-8"))
    assert 0 <= payload["score"] <= 100
    assert "DETAILED CHECKS" in (out_dir / "seo_audit.md").read_text(encoding="utf-8")
    assert (out_dir / "seo_audit.html").read_text(encoding="utf-8").startswith("<div class='seo-audit-report'>")
    assert "seo_audit.json" in capsys.readouterr().out


def test_main_prints_json(tmp_path, make_page, capsys):
    html_path = tmp_path / "page.html"
    html_path.write_text(make_page(body="<h1>Only</h1>"), encoding="utf-8")
    main(["--html", str(html_path), "--format", "json"])
    payload = json.loads(capsys.readouterr().out)
    assert "Meta description tag is missing" in payload["errors"]


def test_load_config_rejects_bad_rule_settings(tmp_path):
    bad_value = tmp_path / "bad.yaml"
    bad_value.write_text('SEO-LINKS:\n  max_external_without_nofollow: "abc"\n')
    unknown = tmp_path / "unknown.yaml"
    unknown.write_text("SEO-NOPE:\n  enabled: false\n")

    with pytest.raises(ValidationError):
        load_audit_config(bad_value)
    with pytest.raises(ValueError, match="SEO-NOPE"):
        load_audit_config(unknown)


def test_main_exits_cleanly_on_bad_config(tmp_path, good_page, capsys):
    html_path = tmp_path / "page.html"
    html_path.write_text(good_page, encoding="utf-8")
    cfg = tmp_path / "bad.yaml"
    cfg.write_text('SEO-LINKS:\n  max_external_without_nofollow: "abc"\n')

    with pytest.raises(SystemExit) as excinfo:
        main(["--html", str(html_path), "--config", str(cfg)])
    assert "Invalid rule config" in str(excinfo.value)
    assert capsys.readouterr().out == ""
