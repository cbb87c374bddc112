import os
import tempfile
import threading
import time

import pytest
from flask import Flask, request
from werkzeug.serving import make_server

# Keep the rotating log file out of the working tree during tests
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="relay-logs-"))

from extensions import limiter  # noqa: E402
from routes.events import events_bp  # noqa: E402


class RecordingDestination:
    """A webhook receiver that records what it got and answers as configured."""

    def __init__(self):
        self.received = []
        self.status_code = 200
        self.body = "ok"
        self.delay_seconds = 0
        self.url = None

    @property
    def last(self):
        return self.received[-1]


@pytest.fixture
def destination():
    dest = RecordingDestination()
    dest_app = Flask("destination")

    @dest_app.post("/hook")
    def hook():
        dest.received.append({
            "headers": {k.lower(): v for k, v in request.headers.items()},
            "body": request.get_data(),
        })
        if dest.delay_seconds:
            time.sleep(dest.delay_seconds)
        return dest.body, dest.status_code

    server = make_server("127.0.0.1", 0, dest_app, threaded=True)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    dest.url = f"http://127.0.0.1:{server.server_port}/hook"

    yield dest

    server.shutdown()
    server.server_close()


@pytest.fixture
def app():
    app = Flask(__name__)
    app.config["TESTING"] = True
    app.config["RELAY_TIMEOUT_SECONDS"] = 5
    app.config["SEND_RATE_LIMIT"] = "1000 per minute"

    limiter.init_app(app)
    app.register_blueprint(events_bp)

    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()
