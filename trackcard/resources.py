# trackcard/resources.py
"""MCP resources for the track card."""

import json

from mcp.server.fastmcp import FastMCP

from .view import SearchViewController


def register_resources(mcp: FastMCP, controller: SearchViewController) -> None:
    """Register all track card MCP resources."""

    @mcp.resource("spotify://auth/status")
    def auth_status() -> str:
        """
        Whether an app token is held and when it expires (ms since the epoch).
        The token is fetched once per process; restart after fixing .env.
        """
        cred = controller.credential
        if not controller.credential_valid:
            return "missing"
        return json.dumps(
            {
                "status": "authorized",
                "expires_at_ms": cred.expires_at_ms,
            },
            indent=2,
        )

    @mcp.resource("spotify://card")
    def card() -> str:
        """Title, cover image and status line currently shown on the card."""
        return json.dumps(controller.snapshot(), indent=2, ensure_ascii=False)
