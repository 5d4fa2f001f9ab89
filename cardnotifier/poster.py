"""POST the status card to the chat webhook.

The card is posted once and never retried.  Redirects are followed.
"""

import logging
from typing import Optional

import httpx
from pydantic_core import PydanticSerializationError

from cardnotifier.card.models import StatusCard
from cardnotifier.engine.subshell import resolve_whole
from cardnotifier.errors import SerializationError, ServerError, TransportError

logger = logging.getLogger(__name__)

CONTENT_TYPE = "application/json; charset=utf-8"


def serialize_card(card: StatusCard) -> bytes:
    """Encode *card* with the webhook's JSON key names.

    Raises:
        SerializationError: If the card cannot be encoded.
    """
    try:
        return card.model_dump_json(by_alias=True).encode("utf-8")
    except (PydanticSerializationError, UnicodeEncodeError) as exc:
        raise SerializationError(f"failed to encode card: {exc}") from exc


def post_card(
    card: StatusCard,
    endpoint: str,
    timeout: Optional[float] = None,
    client: Optional[httpx.Client] = None,
) -> None:
    """Send *card* to *endpoint*.

    Args:
        card: Fully resolved card.
        endpoint: Webhook URL, or a single ``$(command)`` that prints it.
        timeout: Request deadline in seconds; ``None`` waits indefinitely.
        client: Optional pre-configured client (tests inject a mock
            transport here).

    Raises:
        SerializationError: Before any network activity if encoding fails.
        TransportError: If the request could not be completed.
        ServerError: If the response status is not 2xx.
    """
    body = serialize_card(card)
    logger.debug("Post Json Data: %s", body.decode("utf-8"))

    url = resolve_whole(endpoint)
    if not url:
        raise TransportError("failed to send the request: webhook URL is empty")
    headers = {"Content-Type": CONTENT_TYPE}

    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as own_client:
                resp = own_client.post(url, content=body, headers=headers)
        else:
            resp = client.post(
                url, content=body, headers=headers, timeout=timeout, follow_redirects=True
            )
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise TransportError(f"failed to send the request: {exc}") from exc

    if not resp.is_success:
        raise ServerError(resp.status_code, resp.text)
    logger.debug("Webhook answered %d", resp.status_code)
