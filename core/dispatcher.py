# =============================================================================
# core/dispatcher.py  —  Request Dispatcher (the single chokepoint)
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Every call to Canva goes through RequestDispatcher.dispatch().  It either:
#     a) returns placeholder data (credentials missing, no network at all), or
#     b) performs ONE authenticated HTTP call with httpx and returns the
#        decoded JSON body.
#
#   Downstream code (domain operations, tools, resource renderers) never
#   needs to know which of the two happened.
#
# RETURN CHANNEL:
#   dispatch() NEVER raises.  It returns Ok(payload) or Err(error), where
#   error is one of:
#     - RemoteRejected(status, body)  → a response arrived with a non-2xx status
#     - NoResponse()                  → sent, but the transport failed
#     - RequestSetupFailed(reason)    → the request never left the process
#
# NO RETRIES, NO BACKOFF, NO TIMEOUT OVERRIDE:
#   One call, httpx default timeouts, whatever comes back is final.
# =============================================================================

import json
import logging
from typing import Optional

import httpx

from core import mock_data
from core.credentials import CredentialContext
from core.models import (
    DispatchError,
    DispatchResult,
    Err,
    NoResponse,
    Ok,
    RemoteRejected,
    RequestDescriptor,
    RequestSetupFailed,
)

logger = logging.getLogger(__name__)

BASE_URL = "https://api.canva.com/v1"


class RequestDispatcher:
    """Turns a RequestDescriptor into Ok(payload) or Err(dispatch error).

    Args:
        credentials: The process-wide credential context.
        transport: Optional httpx transport.  Tests pass an
            ``httpx.MockTransport`` here to simulate the remote service.
    """

    def __init__(
        self,
        credentials: CredentialContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.credentials = credentials
        self._transport = transport

    @property
    def live(self) -> bool:
        return self.credentials.is_configured()

    async def dispatch(self, request: RequestDescriptor) -> DispatchResult:
        # --- Step 1: placeholder short-circuit ---
        if not self.credentials.is_configured():
            logger.debug("mock mode: %s %s", request.method, request.path)
            return Ok(mock_data.lookup(request.path))

        # --- Step 2: build the request (nothing has been sent yet) ---
        url = f"{BASE_URL}{request.path}"
        try:
            content = None if request.body is None else json.dumps(request.body)
        except (TypeError, ValueError) as e:
            return self._fail(request, RequestSetupFailed(str(e)))

        async with httpx.AsyncClient(transport=self._transport) as client:
            # Headers are encoded here: non-ASCII secrets fail before sending.
            try:
                outgoing = client.build_request(
                    request.method,
                    url,
                    headers=self.credentials.auth_headers(),
                    content=content,
                )
            except (httpx.InvalidURL, httpx.UnsupportedProtocol, ValueError, TypeError) as e:
                return self._fail(request, RequestSetupFailed(str(e)))

            # --- Step 3: one network call ---
            logger.debug("live call: %s %s", request.method, request.path)
            try:
                response = await client.send(outgoing)
            except (httpx.UnsupportedProtocol, httpx.LocalProtocolError) as e:
                return self._fail(request, RequestSetupFailed(str(e)))
            except httpx.HTTPError:
                return self._fail(request, NoResponse())

        # --- Step 4: classify the response ---
        if not response.is_success:
            return self._fail(request, RemoteRejected(response.status_code, response.text))

        return Ok(_decode_body(response))

    def _fail(self, request: RequestDescriptor, error: DispatchError) -> Err:
        logger.warning("%s %s failed: %s", request.method, request.path, error.message)
        return Err(error)


def _decode_body(response: httpx.Response):
    """Decoded JSON body; raw text if the body is not JSON; None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
