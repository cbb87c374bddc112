import requests

from audit.logger import logger
from config import Config
from exceptions.relay_exceptions import DeliveryTransportError
from security.signature import sign_payload

# Placeholder delivery GUID. Every delivery carries the same value, so
# receivers that dedupe on X-GitHub-Delivery will see repeats as duplicates.
DELIVERY_ID = "GUID"


def build_delivery_headers(event_type: str, signature: str) -> dict:
    return {
        "X-GitHub-Event": event_type,
        "X-GitHub-Delivery": DELIVERY_ID,
        "X-Hub-Signature": signature,
        "Content-Type": "application/json",
    }


def deliver(event, *, timeout_seconds: float = Config.RELAY_TIMEOUT_SECONDS) -> str:
    """
    Signs the event payload and POSTs it to event.address, once.

    Returns:
      The destination's response body on 2xx. On any other status the
      delivery still counts as done and a message carrying the destination's
      body is returned instead.

    Raises:
      DeliveryTransportError if no HTTP response was obtained
      (connection/DNS failure, timeout, invalid URL, broken response).
    """
    # Body goes out byte-for-byte as signed
    body = event.payload.encode("utf-8")
    signature = sign_payload(body, event.secret.encode("utf-8"))
    headers = build_delivery_headers(event.event_type, signature)

    logger.info(
        f"Relaying webhook | address={event.address} | event={event.event_type} "
        f"| bytes={len(body)}"
    )

    try:
        resp = requests.post(
            event.address,
            data=body,
            headers=headers,
            timeout=timeout_seconds,
        )
    except (requests.RequestException, ValueError) as e:
        # ValueError: header values http.client cannot encode, hosts urllib3 cannot parse
        logger.error(
            f"Webhook delivery failed | address={event.address} "
            f"| event={event.event_type} | error={e}"
        )
        raise DeliveryTransportError(event.address, str(e)) from e

    if 200 <= resp.status_code < 300:
        logger.info(
            f"Webhook delivered | address={event.address} | status={resp.status_code}"
        )
        return resp.text

    logger.warning(
        f"Webhook rejected by destination | address={event.address} "
        f"| status={resp.status_code}"
    )
    return (
        f"Event delivered but the destination responded with an error "
        f"(HTTP {resp.status_code}): {resp.text}"
    )
