"""
HTML rendering for the PR portfolio page.

Turns the ContributionDocument written by the fetch step into a single
static page, in one of the styles from renderer.styles.
"""

from renderer.page import compute_stats, render_page
from renderer.styles import STYLES, get_style
from renderer.timeago import time_ago

__all__ = [
    "compute_stats",
    "render_page",
    "STYLES",
    "get_style",
    "time_ago",
]
