# trackcard/page.py
"""HTML for the single card page."""

from html import escape
from typing import Any, Dict

from .constants import SEARCH_ICON


PLACEHOLDER_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="300" height="300" viewBox="0 0 300 300">
<rect width="300" height="300" rx="16" fill="#d9d9d9"/>
<circle cx="150" cy="150" r="90" fill="#bdbdbd"/>
<circle cx="150" cy="150" r="22" fill="#d9d9d9"/>
</svg>
"""

SEARCH_ICON_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="20" height="20" viewBox="0 0 24 24" fill="none" stroke="#555" stroke-width="2">
<circle cx="10" cy="10" r="6"/>
<path d="M15 15l6 6"/>
</svg>
"""

STYLE = """
body { margin: 0; font-family: system-ui, sans-serif; background: #f4f4f4; }
.app-header { padding: 24px; text-align: center; }
.app-title { letter-spacing: 0.2em; margin: 0 0 16px; }
.search-box { display: inline-flex; width: min(480px, 90vw); }
.search-icon { width: 20px; height: 20px; margin: 10px 8px 0 0; }
.search-input { flex: 1; padding: 10px 14px; border-radius: 24px; border: 1px solid #bbb; }
.status { color: #333; margin-top: 8px; }
.main-container { display: flex; justify-content: center; }
.music-card { width: 320px; padding: 24px; border-radius: 24px; background: #fff; text-align: center; }
.cover { width: 100%; border-radius: 16px; }
.title { margin: 16px 0; font-weight: 600; }
.progress-track { height: 4px; background: #ddd; border-radius: 2px; position: relative; }
.progress-thumb { width: 12px; height: 12px; border-radius: 50%; background: #333; position: absolute; top: -4px; left: 0; }
.play-button { margin-top: 20px; width: 56px; height: 56px; border-radius: 50%; border: none; background: #222; }
.play-triangle { display: inline-block; border-style: solid; border-width: 10px 0 10px 16px; border-color: transparent transparent transparent #fff; }
"""


def render_page(snapshot: Dict[str, Any], query: str = "") -> str:
    """Render the header, search form, status line and card for one snapshot."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Music Player</title>
<style>{STYLE}</style>
</head>
<body>
<div class="app-root">
  <header class="app-header">
    <h1 class="app-title">MUSIC PLAYER</h1>
    <form class="search-box" role="search" aria-label="Search" action="/search" method="get">
      <img class="search-icon" src="{SEARCH_ICON}" alt="search icon" aria-hidden="true">
      <input class="search-input" type="search" name="q" value="{escape(query)}"
             placeholder="Search for an artist, song or playlist"
             aria-label="Search for an artist, song or playlist">
    </form>
    <div class="status"><small data-status="{escape(snapshot['status'])}">{escape(snapshot['message'])}</small></div>
  </header>
  <div class="main-container">
    <div class="music-card" role="group" aria-label="Music Card">
      <div class="cover-wrap"><img class="cover" src="{escape(snapshot['image_url'])}" alt="cover"></div>
      <div class="title">{escape(snapshot['title'])}</div>
      <div class="progress-wrap"><div class="progress-track"><div class="progress-thumb"></div></div></div>
      <button class="play-button" type="button" aria-label="play"><span class="play-triangle"></span></button>
    </div>
  </div>
</div>
</body>
</html>
"""
