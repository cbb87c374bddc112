import hmac
import hashlib

# GitHub's legacy X-Hub-Signature scheme: "sha1=" + hex(HMAC-SHA1(secret, body))
SIGNATURE_PREFIX = "sha1="


def sign_payload(payload: bytes, key: bytes) -> str:
    """
    Signs the raw payload bytes with the given key.

    HMAC accepts keys of any length (including empty), so this never fails.
    The key is always supplied by the caller; there is no process-wide secret.
    """
    signature = hmac.new(
        key,
        payload,
        hashlib.sha1
    ).hexdigest()

    return f"{SIGNATURE_PREFIX}{signature}"
