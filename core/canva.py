# =============================================================================
# core/canva.py  —  Domain Operations (designs, brands, assets, users)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One small async method per (collection × action).  Each method:
#     1. validates / defaults its own parameters (pydantic validate_call)
#     2. builds the path + query string deterministically
#     3. hands a RequestDescriptor to the dispatcher and returns its result
#
#   Nothing here looks inside the payload that comes back.
#
# QUERY STRINGS:
#   limit is always sent (default 50).  startAfter and type are sent only
#   when given; absent means omitted, never "startAfter=".
#
# VALIDATION:
#   Bad input (limit=150, asset_type="GIF", url="not a url") raises
#   pydantic.ValidationError BEFORE anything is dispatched.
# =============================================================================

from typing import Optional
from urllib.parse import quote, urlencode

from pydantic import validate_call

from core.dispatcher import RequestDispatcher
from core.models import (
    DEFAULT_LIMIT,
    AssetType,
    DispatchResult,
    ImageUrl,
    Limit,
    RequestDescriptor,
)


def _item_path(collection: str, item_id: str) -> str:
    return f"/{collection}/{quote(item_id, safe='')}"


def _list_path(collection: str, **params: Optional[object]) -> str:
    query = urlencode({k: v for k, v in params.items() if v is not None})
    return f"/{collection}?{query}" if query else f"/{collection}"


class CanvaOperations:
    """Typed convenience calls on top of a RequestDispatcher."""

    def __init__(self, dispatcher: RequestDispatcher) -> None:
        self.dispatcher = dispatcher

    async def _get(self, path: str) -> DispatchResult:
        return await self.dispatcher.dispatch(RequestDescriptor("GET", path))

    # --- Designs -------------------------------------------------------------
    @validate_call
    async def get_design(self, design_id: str) -> DispatchResult:
        return await self._get(_item_path("designs", design_id))

    @validate_call
    async def list_designs(
        self,
        limit: Limit = DEFAULT_LIMIT,
        start_after: Optional[str] = None,
    ) -> DispatchResult:
        return await self._get(_list_path("designs", limit=limit, startAfter=start_after))

    # --- Brands --------------------------------------------------------------
    @validate_call
    async def get_brand(self, brand_id: str) -> DispatchResult:
        return await self._get(_item_path("brands", brand_id))

    @validate_call
    async def list_brands(
        self,
        limit: Limit = DEFAULT_LIMIT,
        start_after: Optional[str] = None,
    ) -> DispatchResult:
        return await self._get(_list_path("brands", limit=limit, startAfter=start_after))

    # --- Assets --------------------------------------------------------------
    @validate_call
    async def get_asset(self, asset_id: str) -> DispatchResult:
        return await self._get(_item_path("assets", asset_id))

    @validate_call
    async def list_assets(
        self,
        limit: Limit = DEFAULT_LIMIT,
        start_after: Optional[str] = None,
        asset_type: Optional[AssetType] = None,
    ) -> DispatchResult:
        return await self._get(
            _list_path("assets", limit=limit, startAfter=start_after, type=asset_type)
        )

    @validate_call
    async def upload_image(
        self,
        url: ImageUrl,
        title: Optional[str] = None,
        brand_id: Optional[str] = None,
    ) -> DispatchResult:
        """Ask Canva to import an image from a public URL."""
        body = {"url": url}
        if title is not None:
            body["title"] = title
        if brand_id is not None:
            body["brandId"] = brand_id
        return await self.dispatcher.dispatch(RequestDescriptor("POST", "/assets/images", body))

    # --- Users ---------------------------------------------------------------
    @validate_call
    async def get_user(self, user_id: str) -> DispatchResult:
        return await self._get(_item_path("users", user_id))

    @validate_call
    async def list_users(
        self,
        limit: Limit = DEFAULT_LIMIT,
        start_after: Optional[str] = None,
    ) -> DispatchResult:
        return await self._get(_list_path("users", limit=limit, startAfter=start_after))
