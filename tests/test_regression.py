"""
Regression tests for behaviour that is easy to break by accident.

1. A failed mutation must not roll back sibling mutations in the same request.
2. Store failures other than a reference violation must stay opaque.
3. A failing nullable field leaves its sibling fields resolved.
"""
import pytest

from app.errors import StoreError, StoreErrorKind
from app.services import comment_service, link_service


# ---------------------------------------------------------------------------
# 1. Failed mutation is isolated from its siblings
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_failed_comment_keeps_sibling_link(gql):
    body = await gql("""
        mutation {
            ok: postLink(url: "http://a.com/kept", description: "kept") { id }
            bad: postCommentOnLink(linkId: "9999999", body: "hi") { id }
        }
    """)
    assert body["data"] is None
    assert "9999999" in body["errors"][0]["message"]

    found = await gql('{ link(id: "1") { url } }')
    assert found["data"]["link"] == {"url": "http://a.com/kept"}


# ---------------------------------------------------------------------------
# 2. Unclassified store failures propagate as-is
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_other_store_failure_is_not_translated(gql, monkeypatch):
    link = await gql('mutation { postLink(url: "http://a.com/1", description: "d") { id } }')
    link_id = link["data"]["postLink"]["id"]

    async def _failing_add_comment(db, link_id, body):
        raise StoreError(StoreErrorKind.UNIQUE_VIOLATED, "duplicate comment")

    monkeypatch.setattr(comment_service, "add_comment", _failing_add_comment)

    body = await gql(
        'mutation($id: ID!) { postCommentOnLink(linkId: $id, body: "hi") { id } }',
        {"id": link_id},
    )
    error = body["errors"][0]
    assert error["message"] == "duplicate comment"
    assert error.get("extensions", {}).get("code") != "LINK_NOT_FOUND"


# ---------------------------------------------------------------------------
# 3. Partial responses
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_failing_nullable_field_keeps_siblings(gql, monkeypatch):
    async def _broken_get_link(db, link_id):
        raise RuntimeError("connection reset")

    monkeypatch.setattr(link_service, "get_link", _broken_get_link)

    body = await gql('{ info link(id: "1") { id } }')
    assert body["data"] == {
        "info": "This is the API of a Hackernews Clone",
        "link": None,
    }
    assert body["errors"][0]["message"] == "connection reset"
    assert body["errors"][0]["path"] == ["link"]
