import asyncio

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

import threadwalk.server.api as server_api
from threadwalk.server.models import RenderRequest
from threadwalk.settings import Settings


def _payload(max_depth=None):
    return RenderRequest.model_validate(
        {
            "max_depth": max_depth,
            "comments": [
                {"comment_id": 1, "author": "ann", "content": "root"},
                {"comment_id": 2, "parent_id": 1, "author": "bo", "content": "reply"},
                {"comment_id": 3, "parent_id": 2, "author": "cy", "content": "nested"},
            ],
        }
    )


def test_render_endpoint_flattens_past_the_cap():
    response = server_api.render_comments(_payload(max_depth=2), settings=Settings(max_depth=5))

    assert response.max_depth == 2
    assert response.count == 3
    assert [(item.comment_id, item.depth) for item in response.items] == [("1", 0), ("2", 1), ("3", 1)]
    assert response.items[1].has_children is True
    assert response.items[1].parent_id == "1"
    assert response.outline.splitlines()[-1] == "  cy: nested"


def test_render_endpoint_uses_configured_depth_by_default():
    response = server_api.render_comments(_payload(), settings=Settings(max_depth=0))

    assert response.max_depth == 0
    assert [item.depth for item in response.items] == [0, 1, 2]


def test_render_endpoint_reports_walker_errors(monkeypatch):
    def _boom(comments, max_depth, *, indent):
        raise ValueError("Comment '1' is its own ancestor")

    monkeypatch.setattr(server_api, "render_thread", _boom)

    with pytest.raises(HTTPException) as excinfo:
        server_api.render_comments(_payload(), settings=Settings(max_depth=0))
    assert excinfo.value.status_code == 422


def test_render_request_rejects_invalid_depth():
    with pytest.raises(ValidationError):
        RenderRequest.model_validate({"comments": [], "max_depth": -3})


def test_healthz():
    assert asyncio.run(server_api.healthz()) == {"status": "ok"}
