from __future__ import annotations

import logging
from typing import Any, Dict, Literal, Optional

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import HTMLResponse, PlainTextResponse
from pydantic import BaseModel, Field, ValidationError

from adapters.html import SoupDocument
from common.seo_audit import (
    AuditConfig,
    AuditEngine,
    AuditFailedError,
    NavigationTiming,
    render_html,
    render_text,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seo-audit", tags=["seo-audit"])


class NavigationTimingIn(BaseModel):
    navigation_start: float
    load_event_end: float


class SeoAuditRequest(BaseModel):
    html: str
    url: str = ""
    hostname: Optional[str] = None
    navigation_timing: Optional[NavigationTimingIn] = None
    config: Dict[str, Dict[str, Any]] = Field(default_factory=dict)


@router.post("")
def seo_audit(
    body: SeoAuditRequest,
    format: Literal["json", "text", "html"] = Query("json"),
):
    timing = None
    if body.navigation_timing is not None:
        timing = NavigationTiming(
            navigation_start=body.navigation_timing.navigation_start,
            load_event_end=body.navigation_timing.load_event_end,
        )
    document = SoupDocument.from_html(
        body.html,
        url=body.url,
        hostname=body.hostname,
        navigation_timing=timing,
    )
    try:
        result = AuditEngine(document, config=AuditConfig(rules=body.config)).run_audit()
    except AuditFailedError as exc:
        logger.warning("SEO audit failed: %s", exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=422, detail=f"Invalid rule config: {exc}") from exc

    if format == "text":
        return PlainTextResponse(render_text(result))
    if format == "html":
        return HTMLResponse(render_html(result))
    return result.model_dump(mode="json")
