"""Calendar timezone lookups."""

from __future__ import annotations

import logging
import urllib.parse
from typing import TYPE_CHECKING, Any, Final

import requests
from azure.identity import ClientSecretCredential
from typing_extensions import TypedDict

from calsettings.graph.errors import GraphAPIError, NetworkError, ParseError
from calsettings.panel.protocols import TimezoneProvider

if TYPE_CHECKING:
    from azure.core.credentials import TokenCredential

    from calsettings.config import PanelConfig

logger: Final = logging.getLogger(__name__)


class MailboxTimezoneResponse(TypedDict, total=False):
    """Response structure of the mailboxSettings/timeZone endpoint."""

    value: str


GRAPH_URL: Final = "https://graph.microsoft.com/v1.0"
GRAPH_SCOPE: Final = "https://graph.microsoft.com/.default"

# Human-readable explanations for common HTTP errors
HTTP_ERROR_MAP: Final = {
    400: "Bad request - check the user id",
    401: "Invalid or expired access token",
    403: "Application lacks MailboxSettings.Read permission",
    404: "User or mailbox not found",
    429: "Throttled by Microsoft Graph",
    500: "Microsoft Graph internal error",
    503: "Service unavailable",
    504: "Gateway timeout",
}


class GraphTimezoneProvider:
    """Reads the timezone from a user's Outlook mailbox settings.

    The value is fetched on every call so a change made in the calendar
    shows up on the next render. The call blocks for at most `timeout`
    seconds and is never retried.
    """

    def __init__(self, credential: TokenCredential, timeout: float = 10) -> None:
        """Initialize the provider.

        Args:
            credential: Azure credential able to issue Graph tokens
            timeout: Timeout for each HTTP request in seconds
        """
        self.credential = credential
        self.timeout = timeout

    def get_timezone(self, user_id: str) -> str:
        """Fetch the mailbox timezone of *user_id*.

        Returns:
            Timezone name, e.g. "Pacific Standard Time"

        Raises:
            NetworkError: When Graph cannot be reached or no token is issued
            AuthenticationError: When the token is rejected
            NotFoundError: When the user has no mailbox
            GraphAPIError: For other HTTP failures
            ParseError: When the response carries no timezone
        """
        url = f"{GRAPH_URL}/users/{urllib.parse.quote(user_id, safe='')}/mailboxSettings/timeZone"
        try:
            token = self.credential.get_token(GRAPH_SCOPE).token
            resp = requests.get(
                url,
                headers={"Authorization": f"Bearer {token}", "Accept": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("Graph network error: %s", exc)
            raise NetworkError(f"Network error: {exc}", exc) from exc
        except Exception as exc:  # azure-identity raises its own hierarchy
            logger.warning("Graph token request failed: %s", exc)
            raise NetworkError(f"Could not acquire Graph token: {exc}", exc) from exc

        if resp.status_code != 200:
            try:
                body: dict[str, Any] = resp.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict) or not body:
                body = {"message": HTTP_ERROR_MAP.get(resp.status_code, resp.text)}
            err = GraphAPIError.from_response(body, resp.status_code)
            logger.error("Graph error for %s: %s", user_id, err)
            raise err

        try:
            data: MailboxTimezoneResponse = resp.json()
            timezone = data["value"]
        except (ValueError, KeyError, TypeError) as exc:
            raise ParseError(f"Unexpected mailbox settings response: {resp.text}", exc) from exc
        if not isinstance(timezone, str) or not timezone:
            raise ParseError(f"Mailbox timezone is empty for {user_id}")
        return timezone


class StaticTimezoneProvider:
    """Provider that returns the same timezone for everyone."""

    def __init__(self, timezone: str) -> None:
        self.timezone = timezone

    def get_timezone(self, user_id: str) -> str:
        return self.timezone


def create_timezone_provider(config: PanelConfig) -> TimezoneProvider:
    """Create a timezone provider based on configuration.

    Args:
        config: Panel configuration

    Returns:
        GraphTimezoneProvider when Graph credentials are configured,
        otherwise a StaticTimezoneProvider for `default_timezone`
    """
    if not config.has_graph_credentials:
        logger.info("No Graph credentials configured; using %s", config.default_timezone)
        return StaticTimezoneProvider(config.default_timezone)
    credential = ClientSecretCredential(
        tenant_id=config.graph_tenant_id,
        client_id=config.graph_client_id,
        client_secret=config.graph_client_secret,
    )
    return GraphTimezoneProvider(credential, timeout=config.graph_timeout)
