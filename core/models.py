# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the *shape* of every piece of information that
# flows between the dispatcher, the domain operations and the MCP layer.
# Remote payloads themselves are NOT modelled: whatever JSON Canva sends back
# is passed through untouched.
#
# THREE GROUPS LIVE HERE:
#   1. Request side   : RequestDescriptor (what to send)
#   2. Result side    : Ok / Err plus the three DispatchError kinds
#   3. Placeholder    : PathKind / PlaceholderKey (how mock lookup classifies
#                       a request path)
#
# Plus the annotated input types shared by core/canva.py (validation) and
# tools/mcp_server.py (tool input schemas), so both layers agree on limits.
# =============================================================================

from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Generic, Literal, Optional, TypeVar, Union

from pydantic import AfterValidator, AnyUrl, Field, TypeAdapter, ValidationError


T = TypeVar("T")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


# -----------------------------------------------------------------------------
# Shared input constraints
# -----------------------------------------------------------------------------
Limit = Annotated[int, Field(ge=1, le=100, description="Number of items to return (1-100)")]
AssetType = Literal["IMAGE", "VIDEO", "AUDIO", "FONT"]
DocSection = Literal[
    "overview",
    "getting-started",
    "authentication",
    "designs",
    "brands",
    "assets",
    "users",
]

DEFAULT_LIMIT = 50

_URL = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    """Accept only absolute URLs, but keep the caller's exact spelling."""
    try:
        _URL.validate_python(value)
    except ValidationError:
        raise ValueError(f"invalid URL: {value!r}") from None
    return value


ImageUrl = Annotated[str, AfterValidator(_check_url)]


# -----------------------------------------------------------------------------
# RequestDescriptor: one outbound call, built per operation, consumed once
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RequestDescriptor:
    """A single request for the dispatcher."""

    method: HttpMethod
    path: str                          # "/designs?limit=50", always starts with "/"
    body: Optional[Any] = None         # JSON-serialisable value, POST/PUT only


# -----------------------------------------------------------------------------
# Dispatch errors: exactly three kinds, each with a caller-facing message
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class RemoteRejected:
    """Canva answered, but with a non-2xx status."""

    status: int
    body: str                          # raw response text, never parsed

    @property
    def message(self) -> str:
        return f"Canva API Error: {self.status} - {self.body}"


@dataclass(frozen=True)
class NoResponse:
    """The request was sent but no response came back (transport failure)."""

    @property
    def message(self) -> str:
        return "No response received from Canva API"


@dataclass(frozen=True)
class RequestSetupFailed:
    """The request could not be built or never left the process."""

    reason: str

    @property
    def message(self) -> str:
        return f"Error setting up request: {self.reason}"


DispatchError = Union[RemoteRejected, NoResponse, RequestSetupFailed]


# -----------------------------------------------------------------------------
# Ok / Err: the dispatcher's return channel
# -----------------------------------------------------------------------------
# Callers check `isinstance(result, Err)` (or `result.ok`) instead of catching
# exceptions.  Resource renderers are the one place that turns Err into text.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T
    ok: Literal[True] = True


@dataclass(frozen=True)
class Err:
    error: DispatchError
    ok: Literal[False] = False

    @property
    def message(self) -> str:
        return self.error.message


DispatchResult = Union[Ok[Any], Err]


# -----------------------------------------------------------------------------
# Placeholder classification
# -----------------------------------------------------------------------------
class Collection(str, Enum):
    """Remote collections that have placeholder payloads."""

    DESIGNS = "designs"
    BRANDS = "brands"
    ASSETS = "assets"
    USERS = "users"


class PathKind(str, Enum):
    ITEM = "item"                      # "/designs/<anything>"
    LISTING = "listing"                # "/designs" or "/designs?limit=50"
    UNKNOWN = "unknown"                # anything else


@dataclass(frozen=True)
class PlaceholderKey:
    """Result of classifying a request path for mock lookup."""

    kind: PathKind
    collection: Optional[Collection] = None
