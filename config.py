import os

from dotenv import load_dotenv

# Load environment variables from .env for local development
load_dotenv()


class Config:
    # Bind address for the relay HTTP server.
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "8000"))

    # Network timeout for outbound webhook deliveries (connect and read).
    # Keeps a slow or unresponsive destination from holding a worker forever.
    RELAY_TIMEOUT_SECONDS = float(os.getenv("RELAY_TIMEOUT_SECONDS", "30"))

    # Flask-Limiter expression applied to the send endpoint.
    SEND_RATE_LIMIT = os.getenv("SEND_RATE_LIMIT", "60 per minute")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    # Used only by the label dump tool.
    GITHUB_API_URL = os.getenv("GITHUB_API_URL", "https://api.github.com")
    GITHUB_TOKEN = os.getenv("GITHUB_TOKEN")
