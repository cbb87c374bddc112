import json

from flask import Blueprint, current_app, jsonify, make_response, request

from audit.logger import logger
from config import Config
from exceptions.relay_exceptions import DeliveryTransportError, InvalidEventRequest
from extensions import limiter
from models.event import Event
from services.relay_service import deliver

# Blueprint exposing the relay to callers (HTML form or scripts)
events_bp = Blueprint("events", __name__, url_prefix="/events")


def _send_rate_limit():
    return current_app.config.get("SEND_RATE_LIMIT", Config.SEND_RATE_LIMIT)


def _read_event_fields():
    # Form posts carry plain strings; JSON callers may inline the payload as an object
    if request.is_json:
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return {}
        fields = dict(data)
        payload = fields.get("payload")
        if payload is not None and not isinstance(payload, str):
            fields["payload"] = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
        return fields

    return request.form.to_dict()


@events_bp.route("/send", methods=["POST"])
@limiter.limit(_send_rate_limit)
def send_event():
    """
    Relays one signed webhook and returns what the destination answered.

    A destination that rejects the payload still yields 200 here; only a
    delivery that never got a response is reported as a failure (502).
    """
    event = Event.from_request_data(_read_event_fields())

    outcome = deliver(
        event,
        timeout_seconds=current_app.config.get(
            "RELAY_TIMEOUT_SECONDS", Config.RELAY_TIMEOUT_SECONDS
        ),
    )

    response = make_response(outcome, 200)
    response.mimetype = "text/plain"
    return response


@events_bp.errorhandler(InvalidEventRequest)
def handle_invalid_event(e):
    logger.warning(f"Rejected send request | missing={e.missing} | invalid={e.invalid}")
    return jsonify({"error": str(e), "missing": e.missing, "invalid": e.invalid}), 400


@events_bp.errorhandler(DeliveryTransportError)
def handle_delivery_failure(e):
    # 502: the relay acted as a gateway and the downstream delivery failed
    return jsonify({
        "error": "Webhook delivery failed",
        "address": e.address,
        "detail": e.detail,
    }), 502
