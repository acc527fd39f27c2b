import os
import base64
import logging
from typing import NamedTuple

import httpx
from dotenv import load_dotenv

from trackcard.constants import DEFAULT_EXPIRES_IN, TOKEN_URL

logger = logging.getLogger(__name__)


class TokenRequestError(RuntimeError):
    """The token endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Token request failed: {status_code} {body}")
        self.status_code = status_code
        self.body = body


class Credential(NamedTuple):
    """App-level access token; only lives in memory."""
    token: str
    expires_at_ms: int

    def is_valid(self, now_ms: int) -> bool:
        return bool(self.token) and now_ms < self.expires_at_ms


def load_env():
    load_dotenv()
    return {
        "CLIENT_ID": os.getenv("SPOTIFY_CLIENT_ID", ""),
        "CLIENT_SECRET": os.getenv("SPOTIFY_CLIENT_SECRET", ""),
        "HOST": os.getenv("HOST", "127.0.0.1"),
        "PORT": int(os.getenv("PORT", "8787")),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO"),
    }

def b64_client_creds(client_id, client_secret) -> str:
    raw = f"{client_id}:{client_secret}".encode()
    return base64.b64encode(raw).decode()

async def request_client_token(client: httpx.AsyncClient, client_id, client_secret, now_ms: int) -> Credential:
    """
    Client Credentials grant. Returns the token with an absolute expiry
    (milliseconds since the epoch); raises TokenRequestError on non-2xx.
    """
    headers = {
        "Authorization": f"Basic {b64_client_creds(client_id, client_secret)}",
        "Content-Type": "application/x-www-form-urlencoded",
    }
    r = await client.post(TOKEN_URL, content="grant_type=client_credentials", headers=headers)
    if not r.is_success:
        raise TokenRequestError(r.status_code, r.text)
    tok = r.json()
    expires_in = tok.get("expires_in") or DEFAULT_EXPIRES_IN
    logger.info("obtained app token, expires in %ss", expires_in)
    return Credential(token=tok["access_token"], expires_at_ms=now_ms + int(expires_in) * 1000)
