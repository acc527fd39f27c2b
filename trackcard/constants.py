# trackcard/constants.py
"""Endpoints, defaults and user-facing strings."""

TOKEN_URL = "https://accounts.spotify.com/api/token"
SPOTIFY_API = "https://api.spotify.com/v1"

DEFAULT_EXPIRES_IN = 3600  # seconds, when the token response omits expires_in

DEFAULT_TITLE = "California"
PLACEHOLDER_COVER = "/assets/album-placeholder.svg"
SEARCH_ICON = "/assets/search-icon.svg"

# error messages shown in the status line
TOKEN_FAILED = "Failed to obtain Spotify token. Check your CLIENT_ID/CLIENT_SECRET in .env"
TOKEN_MISSING_OR_EXPIRED = (
    "Spotify token missing or expired. Restart the dev server after adding credentials to .env"
)
TOKEN_REJECTED = "Spotify token invalid or expired. Restart the dev server after updating .env"
NO_TRACK_FOUND = "No track found for that query."
SEARCH_FAILED = "Failed to search Spotify"

# status lines
STATUS_LOADING = "Searching Spotify…"
STATUS_MISSING_CREDENTIALS = "Missing CLIENT_ID/CLIENT_SECRET in .env (see README)"
STATUS_READY = "Ready to search"
