# =============================================================================
# core/resources.py  —  Resource Renderers (markdown views of Canva objects)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a fetched design / brand / asset into a short markdown document,
#   and serves static documentation sections.
#
# FAILURE BOUNDARY:
#   Renderers NEVER raise on a dispatch error.  An Err result becomes a
#   one-line document:  "Error retrieving design: <message>".
#
# DEFENSIVE FIELD ACCESS:
#   The remote payload has no enforced schema.  Every field is optional:
#   a missing field renders as a fallback string ("Unknown", "Untitled",
#   "No thumbnail available", ...) instead of crashing.
# =============================================================================

from typing import Any

from core.canva import CanvaOperations
from core.models import DocSection, Err

UNKNOWN = "Unknown"


# =============================================================================
# Static documentation
# =============================================================================
DOCUMENTATION: dict[DocSection, str] = {
    "overview": """# Canva API Overview

The Canva API allows you to programmatically interact with Canva's platform. You can manage designs, brands, assets, and users.

## Key Concepts

- **Designs**: Canva documents that can be created, edited, and published
- **Brands**: Collections of design assets and settings that maintain brand consistency
- **Assets**: Images, videos, fonts, and other media used in designs
- **Users**: People who have access to your Canva content

## Authentication

All API requests require authentication using an API key. See the authentication section for details.""",
    "getting-started": """# Getting Started with Canva API

To start using the Canva API:

1. Create a Canva developer account at https://www.canva.dev/
2. Register your application to get an App ID and API key
3. Use these credentials in your API requests

## Making Your First Request

All API requests should include:
- `Authorization` header with your API key
- `X-Canva-App-Id` header with your App ID
- `Content-Type: application/json` for POST requests""",
    "authentication": """# Authentication

The Canva API uses API keys for authentication. Include your API key in the Authorization header of all requests:

```
Authorization: Bearer YOUR_API_KEY
```

Also include your App ID in the X-Canva-App-Id header:

```
X-Canva-App-Id: YOUR_APP_ID
```

Keep your API key secure and never expose it in client-side code.""",
    "designs": """# Designs API

The Designs API allows you to manage Canva designs.

## Endpoints

- GET /v1/designs - List designs
- GET /v1/designs/{designId} - Get a specific design
- POST /v1/designs - Create a new design
- PUT /v1/designs/{designId} - Update a design
- DELETE /v1/designs/{designId} - Delete a design

## Design Object

A design object includes:
- id: Unique identifier
- title: Design title
- createdAt: Creation timestamp
- updatedAt: Last update timestamp
- thumbnailUrl: URL to design thumbnail
- status: DRAFT or PUBLISHED""",
    "brands": """# Brands API

The Brands API allows you to manage brand kits in Canva.

## Endpoints

- GET /v1/brands - List brands
- GET /v1/brands/{brandId} - Get a specific brand
- POST /v1/brands - Create a new brand
- PUT /v1/brands/{brandId} - Update a brand
- DELETE /v1/brands/{brandId} - Delete a brand

## Brand Object

A brand object includes:
- id: Unique identifier
- name: Brand name
- createdAt: Creation timestamp
- updatedAt: Last update timestamp
- colors: Brand colors
- fonts: Brand fonts
- logoUrl: URL to brand logo""",
    "assets": """# Assets API

The Assets API allows you to manage design assets like images, videos, and fonts.

## Endpoints

- GET /v1/assets - List assets
- GET /v1/assets/{assetId} - Get a specific asset
- POST /v1/assets/images - Upload an image
- POST /v1/assets/videos - Upload a video
- POST /v1/assets/fonts - Upload a font
- DELETE /v1/assets/{assetId} - Delete an asset

## Asset Object

An asset object includes:
- id: Unique identifier
- title: Asset title
- type: IMAGE, VIDEO, AUDIO, or FONT
- createdAt: Creation timestamp
- url: URL to access the asset
- brandId: Associated brand (if any)""",
    "users": """# Users API

The Users API allows you to manage users who have access to your Canva content.

## Endpoints

- GET /v1/users - List users
- GET /v1/users/{userId} - Get a specific user
- POST /v1/users - Invite a new user
- PUT /v1/users/{userId} - Update a user's permissions
- DELETE /v1/users/{userId} - Remove a user

## User Object

A user object includes:
- id: Unique identifier
- name: User's name
- email: User's email address
- role: User's role (ADMIN, MEMBER, etc.)
- createdAt: When the user was added""",
}


def render_documentation(section: str) -> str:
    """Look up a documentation section; unknown names list the valid ones."""
    text = DOCUMENTATION.get(section)
    if text is None:
        return (
            f"Documentation section '{section}' not found. "
            f"Available sections: {', '.join(DOCUMENTATION)}"
        )
    return text


# =============================================================================
# Helpers
# =============================================================================
def _as_dict(payload: Any) -> dict:
    return payload if isinstance(payload, dict) else {}


def _field(obj: dict, name: str, fallback: str = UNKNOWN) -> str:
    value = obj.get(name)
    return fallback if value in (None, "") else str(value)


def _bullets(entries: Any, key: str, detail: str, empty: str) -> str:
    """Render a list of dicts as "- <key>: <detail>" lines."""
    if not isinstance(entries, list) or not entries:
        return empty
    lines = []
    for entry in entries:
        entry = _as_dict(entry)
        lines.append(f"- {_field(entry, key)}: {_field(entry, detail)}")
    return "\n".join(lines)


# =============================================================================
# Object renderers
# =============================================================================
async def render_design(operations: CanvaOperations, design_id: str) -> str:
    result = await operations.get_design(design_id)
    if isinstance(result, Err):
        return f"Error retrieving design: {result.message}"

    design = _as_dict(result.value)
    thumbnail = design.get("thumbnailUrl")
    preview = f"![Thumbnail]({thumbnail})" if thumbnail else "No thumbnail available"

    return f"""# Design: {_field(design, "title", "Untitled")}

ID: {_field(design, "id")}
Created: {_field(design, "createdAt")}
Updated: {_field(design, "updatedAt")}
Status: {_field(design, "status")}

{preview}

## Actions
- View in Canva: https://www.canva.com/design/{design_id}
- Fetch the raw design data with the `get_design` tool
- Browse other designs with the `list_designs` tool"""


async def render_brand(operations: CanvaOperations, brand_id: str) -> str:
    result = await operations.get_brand(brand_id)
    if isinstance(result, Err):
        return f"Error retrieving brand: {result.message}"

    brand = _as_dict(result.value)
    logo = brand.get("logoUrl")
    logo_line = f"![Logo]({logo})" if logo else "No logo available"

    return f"""# Brand: {_field(brand, "name", "Untitled")}

ID: {_field(brand, "id")}
Created: {_field(brand, "createdAt")}
Updated: {_field(brand, "updatedAt")}

{logo_line}

## Brand Colors
{_bullets(brand.get("colors"), "name", "value", "No colors defined")}

## Brand Fonts
{_bullets(brand.get("fonts"), "name", "type", "No fonts defined")}

## Actions
- View brand assets using the `list_assets` tool
- Upload an image for this brand using the `upload_image` tool with this brand id"""


async def render_asset(operations: CanvaOperations, asset_id: str) -> str:
    result = await operations.get_asset(asset_id)
    if isinstance(result, Err):
        return f"Error retrieving asset: {result.message}"

    asset = _as_dict(result.value)
    url = asset.get("url")
    brand_id = asset.get("brandId")
    # Image markup only for images that actually have a URL.
    image = f"![Asset]({url})" if asset.get("type") == "IMAGE" and url else ""
    brand_line = f"Brand ID: {brand_id}" if brand_id else "Not associated with a brand"
    url_line = f"URL: {url}" if url else "No URL available"

    return f"""# Asset: {_field(asset, "title", "Untitled")}

ID: {_field(asset, "id")}
Type: {_field(asset, "type")}
Created: {_field(asset, "createdAt")}
{brand_line}

{image}
{url_line}

## Actions
- Use this asset in designs
- Fetch the raw asset data with the `get_asset` tool"""
