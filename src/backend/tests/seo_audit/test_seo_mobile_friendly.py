from common.seo_audit.models import Status
from common.seo_audit.rules.seo_mobile_friendly import SEO_MOBILE_FRIENDLY

VIEWPORT = '<meta name="viewport" content="width=device-width, initial-scale=1">'


def test_device_width_viewport_passes(make_ctx, make_page):
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(VIEWPORT)))
    assert out.by_category("Mobile Responsive")[0].status == Status.PASS


def test_missing_or_fixed_viewport_is_error(make_ctx, make_page):
    for head in ("", '<meta name="viewport" content="width=1024">'):
        out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(head)))
        finding = out.by_category("Mobile Responsive")[0]
        assert finding.status == Status.ERROR
        assert finding.message in out.errors


def test_default_font_size_passes(make_ctx, make_page):
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(VIEWPORT)))
    font = out.by_category("Font Size")[0]
    assert font.status == Status.PASS
    assert "16px" in font.message


def test_small_inline_font_size_warns(make_ctx, make_page):
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(VIEWPORT, body_attrs='style="font-size: 14px"')))
    font = out.by_category("Font Size")[0]
    assert font.status == Status.WARNING
    assert "14px" in font.message


def test_font_size_from_stylesheet(make_ctx, make_page):
    head = VIEWPORT + "<style>html { font-size: 20px } body { font-size: 0.7em; }</style>"
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(head)))
    font = out.by_category("Font Size")[0]
    assert font.status == Status.WARNING
    assert "14px" in font.message


def test_touch_targets_all_large_pass(make_ctx, make_page):
    body = '<a href="/a" style="width:44px;height:44px">a</a><button style="min-width:60px;min-height:48px">b</button>'
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(VIEWPORT, body)))
    assert out.by_category("Touch Targets")[0].status == Status.PASS


def test_touch_targets_undersized_warn(make_ctx, make_page):
    body = '<a href="/a" style="width:44px;height:44px">a</a><button style="width:30px;height:48px">b</button><a href="/c">c</a>'
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(make_page(VIEWPORT, body)))
    touch = out.by_category("Touch Targets")[0]
    assert touch.status == Status.WARNING
    assert touch.message.startswith("2 elements smaller than 44x44px")
    assert len(out.recommendations) == 1


def test_no_body_font_size_undetermined_warns(make_ctx):
    html = "<html><head></head></html>"
    out = SEO_MOBILE_FRIENDLY().evaluate(make_ctx(html))
    font = out.by_category("Font Size")[0]
    assert font.status == Status.WARNING
    assert "could not be determined" in font.message
