from flask import Flask, jsonify, g

from config import Config
from extensions import limiter
from routes.events import events_bp
from audit.request_context import init_request_id, REQUEST_ID_HEADER

app = Flask(__name__)

app.config["RELAY_TIMEOUT_SECONDS"] = Config.RELAY_TIMEOUT_SECONDS
app.config["SEND_RATE_LIMIT"] = Config.SEND_RATE_LIMIT

# MIDDLEWARES (OBSERVABILITY)
# Initialize request correlation ID at the beginning of each request
@app.before_request
def _before_request():
    init_request_id()

# Propagate request_id back to the caller for cross-service tracing
@app.after_request
def _after_request(response):
    response.headers[REQUEST_ID_HEADER] = g.request_id
    return response

# INIT EXTENSIONS
limiter.init_app(app)

# REGISTER BLUEPRINTS
app.register_blueprint(events_bp)


@app.route("/", methods=["GET"])
def index():
    # Manual test form posting to /events/send
    return app.send_static_file("index.html")


@app.route("/health", methods=["GET"])
def health_check():
    return jsonify({"status": "healthy"}), 200


# ENTRYPOINT
if __name__ == "__main__":
    app.run(host=Config.HOST, port=Config.PORT, debug=True)
