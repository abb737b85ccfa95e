"""Render the portfolio page from a ContributionDocument."""

from datetime import datetime, timezone
from html import escape
from typing import Optional

from models.data_models import ContributionDocument, ContributionStats
from renderer.styles import get_style

BASE_CSS = """
      :root {
        --color-bg: #0d1117;
        --color-text: #c9d1d9;
        --color-text-secondary: #8b949e;
        --color-border: #30363d;
        --color-link: #58a6ff;
      }
      * { margin: 0; padding: 0; box-sizing: border-box; }
      body {
        font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Helvetica, Arial, sans-serif, "Apple Color Emoji", "Segoe UI Emoji";
        line-height: 1.5;
        background-color: var(--color-bg);
        color: var(--color-text);
      }
      a { color: inherit; text-decoration: none; }
      a:hover { text-decoration: underline; color: var(--color-link); }
      .container { max-width: 800px; margin: 40px auto; padding: 0 20px; }
      .header { display: flex; align-items: center; gap: 16px; margin-bottom: 16px; }
      .header-avatar { width: 50px; height: 50px; border-radius: 50%; }
      .header-info h1 { font-size: 24px; font-weight: 600; }
      .header-info p { color: var(--color-text-secondary); font-size: 14px; }
      .stats { display: flex; gap: 16px; font-size: 14px; color: var(--color-text-secondary); }
      .stats strong { color: var(--color-text); }
      .no-prs { text-align: center; padding: 40px; border: 1px solid var(--color-border); border-radius: 6px; }
"""

EMPTY_STATE = """<div class="no-prs">
  <h2>No pull request data found</h2>
  <p>Run the fetch script (python main.py fetch) or check the data/prs.json file.</p>
</div>"""


def compute_stats(document: ContributionDocument) -> ContributionStats:
    """Count stored PRs by state.

    closed is derived as total - merged - open. The document model only
    accepts open/closed/merged states, so the subtraction always matches
    a direct count.
    """
    total = len(document.records)
    merged = sum(1 for pr in document.records if pr.state == "merged")
    open_count = sum(1 for pr in document.records if pr.state == "open")
    return ContributionStats(
        total=total,
        merged=merged,
        open=open_count,
        closed=total - merged - open_count,
    )


def _render_header(document: ContributionDocument, stats: ContributionStats) -> str:
    return f"""<header class="header">
  <img src="{escape(document.avatar_url)}" alt="User avatar" class="header-avatar" />
  <div class="header-info">
    <h1>{escape(document.display_name)} is Contributing...</h1>
    <p>{escape(document.user)}'s recent pull requests on GitHub</p>
    <div class="stats">
      <span><strong>{stats.total}</strong> total</span>
      <span><strong>{stats.merged}</strong> merged</span>
      <span><strong>{stats.open}</strong> open</span>
      <span><strong>{stats.closed}</strong> closed</span>
    </div>
  </div>
</header>"""


def render_page(
    document: Optional[ContributionDocument],
    style: str = "list",
    now: Optional[datetime] = None
) -> str:
    """Render the complete HTML page.

    Args:
        document: Loaded document, or None when there is no data yet
        style: Presentation style name ("list" or "cards")
        now: Reference time for relative dates (default: current UTC time)

    Returns:
        HTML document as a string. An absent document or one without PRs
        renders the "no data" placeholder.

    Raises:
        ValueError: If the style is unknown
    """
    page_style = get_style(style)
    if now is None:
        now = datetime.now(timezone.utc)

    if document is not None:
        title = f"{escape(document.display_name)}'s Contributions"
        body = _render_header(document, compute_stats(document))
        if document.records:
            body += "\n" + page_style.render_records(document.records, now)
        else:
            body += "\n" + EMPTY_STATE
    else:
        title = "My Contributions"
        body = EMPTY_STATE

    return f"""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{title}</title>
    <style>{BASE_CSS}{page_style.css}</style>
  </head>
  <body>
    <div class="container">
{body}
    </div>
  </body>
</html>
"""
