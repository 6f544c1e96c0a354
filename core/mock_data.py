# =============================================================================
# core/mock_data.py  —  Placeholder Data Provider
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Maps a request path to a fixed, deterministic placeholder payload.  Used
#   ONLY when the credential context is unconfigured, so the whole server
#   keeps working (and can be demoed) without a Canva account.
#
# CLASSIFICATION RULE (first path segment decides the collection):
#   /designs/<anything>        → single design
#   /designs, /designs?x=y     → design listing
#   (same for brands, assets, users)
#   anything else              → "no placeholder" message
#
# NOTE ON IDS:
#   The placeholder IGNORES the requested id and every query parameter.
#   get_design("abc") in mock mode still answers with id "mock-design-id".
#   That is demo behaviour and is pinned down by tests.
#
# Pure: no I/O, no randomness, no clock reads.  Timestamps are literals.
# =============================================================================

import copy
from typing import Any

from core.models import Collection, PathKind, PlaceholderKey


# -----------------------------------------------------------------------------
# Static payloads
# -----------------------------------------------------------------------------
NEXT_PAGE_TOKEN = "mock-next-page-token"

_ITEMS: dict[Collection, dict[str, Any]] = {
    Collection.DESIGNS: {
        "id": "mock-design-id",
        "title": "Mock Design",
        "createdAt": "2023-01-01T00:00:00Z",
        "updatedAt": "2023-01-02T00:00:00Z",
        "thumbnailUrl": "https://example.com/thumbnail.jpg",
        "status": "PUBLISHED",
    },
    Collection.BRANDS: {
        "id": "mock-brand-id",
        "name": "Mock Brand",
        "createdAt": "2023-01-01T00:00:00Z",
        "updatedAt": "2023-01-02T00:00:00Z",
    },
    Collection.ASSETS: {
        "id": "mock-asset-id",
        "title": "Mock Asset",
        "type": "IMAGE",
        "createdAt": "2023-01-01T00:00:00Z",
        "url": "https://example.com/asset.jpg",
    },
    Collection.USERS: {
        "id": "mock-user-id",
        "name": "Mock User",
        "email": "user@example.com",
        "role": "MEMBER",
    },
}

# Each listing has exactly two entries and a constant continuation token.
_LISTINGS: dict[Collection, list[dict[str, Any]]] = {
    Collection.DESIGNS: [
        {"id": "mock-design-id-1", "title": "Mock Design 1", "createdAt": "2023-01-01T00:00:00Z"},
        {"id": "mock-design-id-2", "title": "Mock Design 2", "createdAt": "2023-01-02T00:00:00Z"},
    ],
    Collection.BRANDS: [
        {"id": "mock-brand-id-1", "name": "Mock Brand 1", "createdAt": "2023-01-01T00:00:00Z"},
        {"id": "mock-brand-id-2", "name": "Mock Brand 2", "createdAt": "2023-01-02T00:00:00Z"},
    ],
    Collection.ASSETS: [
        {
            "id": "mock-asset-id-1",
            "title": "Mock Asset 1",
            "type": "IMAGE",
            "createdAt": "2023-01-01T00:00:00Z",
        },
        {
            "id": "mock-asset-id-2",
            "title": "Mock Asset 2",
            "type": "VIDEO",
            "createdAt": "2023-01-02T00:00:00Z",
        },
    ],
    Collection.USERS: [
        {"id": "mock-user-id-1", "name": "Mock User 1", "email": "user1@example.com"},
        {"id": "mock-user-id-2", "name": "Mock User 2", "email": "user2@example.com"},
    ],
}

_UNAVAILABLE: dict[str, Any] = {"message": "Mock data not available for this endpoint"}


# =============================================================================
# PUBLIC API
# =============================================================================
def classify_path(path: str) -> PlaceholderKey:
    """Work out which placeholder a request path maps to.

    The query string is dropped first.  Only the first segment is compared
    against the known collections; anything after a "/" that follows it
    (an id, "images" for uploads, or even an empty id as in "/designs/")
    makes it a single-item request.
    """
    route = path.split("?", 1)[0].lstrip("/")
    head, slash, _ = route.partition("/")

    try:
        collection = Collection(head)
    except ValueError:
        return PlaceholderKey(PathKind.UNKNOWN)

    if slash:
        return PlaceholderKey(PathKind.ITEM, collection)
    return PlaceholderKey(PathKind.LISTING, collection)


def lookup(path: str) -> Any:
    """Return the placeholder payload for a request path.

    Total: every path gets an answer.  A fresh copy is returned on every call,
    so mutating the result never leaks into the next lookup.
    """
    key = classify_path(path)

    if key.kind is PathKind.ITEM:
        return copy.deepcopy(_ITEMS[key.collection])

    if key.kind is PathKind.LISTING:
        return {
            key.collection.value: copy.deepcopy(_LISTINGS[key.collection]),
            "nextPageToken": NEXT_PAGE_TOKEN,
        }

    return dict(_UNAVAILABLE)
