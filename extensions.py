from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Each relayed event triggers a real outbound request, so callers are
# throttled per remote address. In-memory storage: one process, no history.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],
    storage_uri="memory://",
)
