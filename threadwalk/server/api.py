from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from threadwalk.render.thread import render_thread
from threadwalk.settings import Settings, get_settings
from .models import RenderedItem, RenderRequest, RenderResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="threadwalk API", version="0.1.0")
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.post("/api/threads/render", response_model=RenderResponse)
def render_comments(payload: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    max_depth = settings.max_depth if payload.max_depth is None else payload.max_depth
    comments = [record.to_comment() for record in payload.comments]
    try:
        rendering = render_thread(comments, max_depth, indent=settings.outline_indent)
    except ValueError as exc:
        logger.warning("Rejected thread of %d comments: %s", len(comments), exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    items = [
        RenderedItem(
            comment_id=entry.comment.comment_id,
            parent_id=entry.comment.parent_id,
            author=entry.comment.author,
            depth=entry.depth,
            has_children=entry.has_children,
        )
        for entry in rendering.entries
    ]
    return RenderResponse(max_depth=max_depth, count=len(items), items=items, outline=rendering.outline)


@app.get("/api/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


__all__ = ["app"]
