from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlparse

from bs4 import BeautifulSoup, Tag
from soupsieve import SelectorSyntaxError

from common.seo_audit.context import parse_px
from common.seo_audit.document import DocumentAccessError, Geometry, NavigationTiming

# Browser defaults applied at the root when nothing in the page sets a value.
DEFAULT_STYLES: Dict[str, str] = {"font-size": "16px"}

INHERITED_PROPERTIES = frozenset(
    {"font-size", "font-family", "font-weight", "font-style", "line-height", "color", "visibility"}
)

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.S)
_RULE_RE = re.compile(r"([^{}]+)\{([^{}]*)\}")


class HTMLDocumentAdapterError(DocumentAccessError):
    pass


def parse_declarations(text: str) -> Dict[str, str]:
    """Parse `a: b; c: d` into a dict, dropping `!important` markers."""
    out: Dict[str, str] = {}
    for part in text.split(";"):
        if ":" not in part:
            continue
        prop, value = part.split(":", 1)
        prop = prop.strip().lower()
        value = value.replace("!important", "").strip()
        if prop and value:
            out[prop] = value
    return out


def _strip_at_rules(css: str) -> str:
    """Drop @-rule blocks (e.g. @media) including their nested rules."""
    out: List[str] = []
    i = 0
    n = len(css)
    while i < n:
        if css[i] == "@":
            brace = css.find("{", i)
            semi = css.find(";", i)
            if semi != -1 and (brace == -1 or semi < brace):
                i = semi + 1
                continue
            if brace == -1:
                break
            depth = 0
            j = brace
            while j < n:
                if css[j] == "{":
                    depth += 1
                elif css[j] == "}":
                    depth -= 1
                    if depth == 0:
                        break
                j += 1
            i = j + 1
            continue
        out.append(css[i])
        i += 1
    return "".join(out)


def parse_stylesheet(css: str) -> List[Tuple[str, Dict[str, str]]]:
    css = _strip_at_rules(_COMMENT_RE.sub("", css))
    rules: List[Tuple[str, Dict[str, str]]] = []
    for selector, body in _RULE_RE.findall(css):
        decls = parse_declarations(body)
        for sel in selector.split(","):
            sel = sel.strip()
            if sel and decls:
                rules.append((sel, decls))
    return rules


class SoupDocument:
    """Document accessor over a static HTML snapshot.

    Computed style resolves inline `style` attributes, then `<style>` rules in source order
    (no specificity), then inheritance for inherited properties, then DEFAULT_STYLES.
    Geometry comes from `width`/`height` attributes or px-valued style lengths; an element
    with no declared size has zero geometry.
    """

    def __init__(
        self,
        soup: BeautifulSoup,
        *,
        url: str = "",
        hostname: Optional[str] = None,
        navigation_timing: Optional[NavigationTiming] = None,
        base_styles: Optional[Mapping[str, str]] = None,
    ):
        if not isinstance(soup, BeautifulSoup):
            raise HTMLDocumentAdapterError("SoupDocument requires a parsed BeautifulSoup document.")
        self._soup = soup
        self._hostname = hostname if hostname is not None else (urlparse(url).hostname or "")
        self._timing = navigation_timing
        self._base_styles = dict(DEFAULT_STYLES)
        if base_styles:
            self._base_styles.update({k.lower(): v for k, v in base_styles.items()})
        self._sheet = self._collect_stylesheet()

    @classmethod
    def from_html(
        cls,
        html: str | bytes,
        *,
        url: str = "",
        hostname: Optional[str] = None,
        navigation_timing: Optional[NavigationTiming] = None,
        base_styles: Optional[Mapping[str, str]] = None,
    ) -> "SoupDocument":
        if not isinstance(html, (str, bytes)):
            raise HTMLDocumentAdapterError(f"Expected HTML text, got {type(html).__name__}.")
        return cls(
            BeautifulSoup(html, "html.parser"),
            url=url,
            hostname=hostname,
            navigation_timing=navigation_timing,
            base_styles=base_styles,
        )

    def _collect_stylesheet(self) -> List[Tuple[Sequence[Tag], Dict[str, str]]]:
        matched: List[Tuple[Sequence[Tag], Dict[str, str]]] = []
        for style in self._soup.find_all("style"):
            for selector, decls in parse_stylesheet(style.get_text()):
                try:
                    elements = self._soup.select(selector)
                except (SelectorSyntaxError, NotImplementedError):
                    # Selectors soupsieve cannot evaluate (pseudo-elements etc.) never match.
                    continue
                matched.append((elements, decls))
        return matched

    def _select(self, selector: str) -> List[Tag]:
        try:
            return self._soup.select(selector)
        except (SelectorSyntaxError, NotImplementedError) as exc:
            raise HTMLDocumentAdapterError(f"Cannot query selector {selector!r}: {exc}") from exc

    # DocumentAccessor

    def query_all(self, selector: str) -> Sequence[Tag]:
        return self._select(selector)

    def get_tag_name(self, element: Tag) -> str:
        return element.name or ""

    def get_attribute(self, element: Tag, name: str) -> Optional[str]:
        value = element.get(name)
        if value is None:
            return None
        if isinstance(value, list):
            return " ".join(value)
        return str(value)

    def get_text_content(self, element: Tag) -> str:
        text = element.get_text()
        if not text and element.string is not None:
            text = str(element.string)
        return text

    def _declared_style(self, element: Tag, prop: str) -> Optional[str]:
        inline = parse_declarations(self.get_attribute(element, "style") or "")
        if prop in inline:
            return inline[prop]
        value = None
        for elements, decls in self._sheet:
            if prop in decls and any(e is element for e in elements):
                value = decls[prop]
        return value

    def get_computed_style(self, element: Any, prop: str) -> str:
        prop = prop.lower()
        if prop == "font-size":
            return f"{self._font_size_px(element):g}px"
        node = element
        while isinstance(node, Tag):
            value = self._declared_style(node, prop)
            if value is not None:
                return value
            if prop not in INHERITED_PROPERTIES:
                break
            node = node.parent
        return self._base_styles.get(prop, "")

    def _font_size_px(self, element: Any) -> float:
        root = parse_px(self._base_styles.get("font-size")) or 16.0
        chain: List[Tag] = []
        node = element
        while isinstance(node, Tag) and not isinstance(node, BeautifulSoup):
            chain.append(node)
            node = node.parent
        size = root
        for node in reversed(chain):
            declared = self._declared_style(node, "font-size")
            if declared is not None:
                size = _resolve_font_size(declared, parent=size, root=root)
        return size

    def get_bounding_geometry(self, element: Tag) -> Geometry:
        return Geometry(
            width=self._dimension(element, "width"),
            height=self._dimension(element, "height"),
        )

    def _dimension(self, element: Tag, axis: str) -> float:
        candidates = [
            parse_px(self.get_attribute(element, axis)),
            parse_px(self._declared_style(element, axis)),
            parse_px(self._declared_style(element, f"min-{axis}")),
        ]
        return max((c for c in candidates if c is not None), default=0.0)

    def get_navigation_timing(self) -> Optional[NavigationTiming]:
        return self._timing

    def current_hostname(self) -> str:
        return self._hostname


def _resolve_font_size(value: str, *, parent: float, root: float) -> float:
    text = value.strip().lower()
    try:
        if text.endswith("rem"):
            return float(text[:-3]) * root
        if text.endswith("em"):
            return float(text[:-2]) * parent
        if text.endswith("%"):
            return float(text[:-1]) / 100 * parent
        if text.endswith("pt"):
            return float(text[:-2]) * 4 / 3
    except ValueError:
        return parent
    px = parse_px(text)
    return parent if px is None else px
