from dataclasses import dataclass

from exceptions.relay_exceptions import InvalidEventRequest

# Inbound field name -> Event attribute
REQUEST_FIELDS = {
    "address": "address",
    "event": "event_type",
    "hmac": "secret",
    "payload": "payload",
}


def _is_utf8_text(value):
    # JSON strings may carry lone surrogates, which cannot be signed or sent
    if not isinstance(value, str):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass(frozen=True)
class Event:
    """
    One webhook to relay: where to send it, what kind of event it is,
    the shared secret to sign with, and the raw body.

    The address is not validated here; an unusable address surfaces
    as a delivery error when the relay tries to reach it.
    """
    address: str
    event_type: str
    secret: str
    payload: str

    @classmethod
    def from_request_data(cls, data) -> "Event":
        missing = [name for name in REQUEST_FIELDS if data.get(name) is None]
        invalid = [
            name for name in REQUEST_FIELDS
            if name not in missing and not _is_utf8_text(data[name])
        ]
        if missing or invalid:
            raise InvalidEventRequest(missing, invalid)

        return cls(**{attr: data[name] for name, attr in REQUEST_FIELDS.items()})
