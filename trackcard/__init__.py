"""Top-1 Spotify track lookup rendered as a static player card."""
