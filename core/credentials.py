# =============================================================================
# core/credentials.py  —  Credential Context
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the two Canva secrets (app id + API key), resolved ONCE at startup.
#   The rest of the system only asks two questions of it:
#     - is_configured()  → live calls or placeholder data?
#     - auth_headers()   → what to attach to a live call
#
# DATA SOURCE TOGGLE:
#   CANVA_APP_ID and CANVA_API_KEY both set   → live Canva API
#   either one missing (or empty)             → placeholder (mock) mode
#   Missing credentials are NOT a startup failure.
#
# The context is immutable and is passed explicitly to the dispatcher; there
# is no module-level client instance.
# =============================================================================

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

APP_ID_ENV = "CANVA_APP_ID"
API_KEY_ENV = "CANVA_API_KEY"


@dataclass(frozen=True)
class CredentialContext:
    """Canva credentials, fixed for the lifetime of the process."""

    app_id: Optional[str] = None
    api_key: Optional[str] = None

    def __post_init__(self) -> None:
        # The only place the "no credentials" warning comes from.
        if not self.is_configured():
            logger.warning(
                "Canva API credentials not found in environment variables "
                "(%s / %s). Using mock data.",
                APP_ID_ENV,
                API_KEY_ENV,
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CredentialContext":
        """Build the context from the process environment (or a given mapping)."""
        env = os.environ if environ is None else environ
        return cls(
            app_id=env.get(APP_ID_ENV) or None,
            api_key=env.get(API_KEY_ENV) or None,
        )

    def is_configured(self) -> bool:
        # Partial configuration counts as unconfigured.
        return bool(self.app_id) and bool(self.api_key)

    def auth_headers(self) -> dict[str, str]:
        """Headers for a live call.  Only meaningful when configured."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "X-Canva-App-Id": f"{self.app_id}",
            "Content-Type": "application/json",
        }

    def __repr__(self) -> str:
        # Never leak the key into logs or tracebacks.
        return f"CredentialContext(app_id={self.app_id!r}, configured={self.is_configured()})"
