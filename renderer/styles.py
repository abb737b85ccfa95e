"""Presentation styles for the portfolio page.

A style decides how the PR entries look; the page shell, header and
stats are shared (see renderer.page). Two layouts are available:

- "list": one row per PR with a colour-coded pull request icon
- "cards": a responsive grid of cards with emoji state badges
"""

from datetime import datetime
from html import escape

from models.data_models import PullRequestRecord
from renderer.timeago import time_ago

STATE_COLORS = {
    "open": "#2da44e",  # green
    "merged": "#8250df",  # purple
    "closed": "#cf222e",  # red
}

STATE_EMOJI = {
    "open": "🟢",
    "merged": "🟣",
    "closed": "🔴",
}

_PR_ICON_PATHS = (
    '<path d="M1.5 3.25a2.25 2.25 0 1 1 3 2.122v5.256a2.251 2.251 0 1 1-1.5 0V5.372A2.25 2.25 0 0 1 1.5 3.25Zm5.677-.434a.75.75 0 0 1 .612.865l-.621 2.483a.75.75 0 0 1-1.484-.37l.621-2.483a.75.75 0 0 1 .872-.495ZM11.5 3.25a2.25 2.25 0 1 1 4.5 0 2.25 2.25 0 0 1-4.5 0Zm-3.25.75a.75.75 0 0 0-1.5 0v5.25a.75.75 0 0 0 1.5 0Z"></path>'
    '<path d="M14.25 5.372a2.25 2.25 0 0 1-1.5-2.122v-.002a2.25 2.25 0 0 1 1.5 2.122Z"></path>'
)


def owner_profile_url(pr: PullRequestRecord) -> str:
    return f"https://github.com/{pr.owner}"


def _link(href: str, body: str, css_class: str = "") -> str:
    class_attr = f' class="{css_class}"' if css_class else ""
    return (
        f'<a href="{escape(href)}"{class_attr} target="_blank" '
        f'rel="noopener noreferrer">{body}</a>'
    )


class PageStyle:
    """Base class for page layouts.

    Subclasses provide CSS, a container element and the markup for one PR.
    """

    name = ""
    css = ""
    container_tag = "main"
    container_class = ""

    def render_state(self, state: str) -> str:
        raise NotImplementedError

    def render_record(self, pr: PullRequestRecord, now: datetime) -> str:
        raise NotImplementedError

    def render_records(self, records: list[PullRequestRecord], now: datetime) -> str:
        items = "\n".join(self.render_record(pr, now) for pr in records)
        return (
            f'<{self.container_tag} class="{self.container_class}">\n'
            f"{items}\n"
            f"</{self.container_tag}>"
        )


class ListStyle(PageStyle):
    """Row-per-PR list with SVG state icons."""

    name = "list"
    container_class = "pr-list"
    css = """
      .pr-list { border-top: 1px solid var(--color-border); padding-top: 24px; margin-top: 24px; }
      .pr-item { display: flex; gap: 16px; padding: 12px 8px; border-bottom: 1px solid var(--color-border); }
      .pr-item:last-child { border-bottom: none; }
      .repo-avatar { width: 32px; height: 32px; border-radius: 50%; margin-top: 2px; }
      .pr-details { flex-grow: 1; }
      .pr-title { font-size: 16px; font-weight: 600; margin-bottom: 4px; }
      .pr-repo { font-size: 14px; color: var(--color-text-secondary); }
      .pr-meta { min-width: 100px; text-align: right; font-size: 14px; color: var(--color-text-secondary); }
      .pr-meta span { display: block; }
      .pr-meta .pr-date { font-size: 12px; }
      .state-icon { margin-right: 8px; vertical-align: text-bottom; }
    """

    def render_state(self, state: str) -> str:
        return (
            f'<svg class="state-icon state-{state}" viewBox="0 0 16 16" version="1.1" '
            f'width="16" height="16" aria-label="{state}" style="fill: {STATE_COLORS[state]}">'
            f"{_PR_ICON_PATHS}</svg>"
        )

    def render_record(self, pr: PullRequestRecord, now: datetime) -> str:
        owner_url = owner_profile_url(pr)
        avatar = (
            f'<img src="{escape(owner_url)}.png" alt="Repository owner avatar" '
            f'class="repo-avatar" />'
        )
        title = self.render_state(pr.state) + escape(pr.title)
        meta = (
            f'<span class="pr-number">#{pr.number}</span>'
            f'<span class="pr-date">{escape(time_ago(pr.created_at, now))}</span>'
        )
        return (
            f'<article class="pr-item">'
            f"{_link(owner_url, avatar)}"
            f'<div class="pr-details">'
            f'<div class="pr-title">{_link(pr.url, title)}</div>'
            f'<div class="pr-repo">{_link(owner_url, escape(pr.repository))}</div>'
            f"</div>"
            f'<div class="pr-meta">{_link(pr.url, meta)}</div>'
            f"</article>"
        )


class CardGridStyle(PageStyle):
    """Card grid with emoji state badges."""

    name = "cards"
    container_tag = "section"
    container_class = "pr-grid"
    css = """
      .pr-grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(240px, 1fr)); gap: 16px; margin-top: 24px; }
      .pr-card { border: 1px solid var(--color-border); border-radius: 6px; padding: 16px; display: flex; flex-direction: column; gap: 8px; }
      .pr-card-state { font-size: 12px; color: var(--color-text-secondary); text-transform: capitalize; }
      .pr-card-title { font-size: 16px; font-weight: 600; }
      .pr-card-footer { display: flex; justify-content: space-between; font-size: 12px; color: var(--color-text-secondary); margin-top: auto; }
    """

    def render_state(self, state: str) -> str:
        return f'<span class="pr-card-state state-{state}">{STATE_EMOJI[state]} {state}</span>'

    def render_record(self, pr: PullRequestRecord, now: datetime) -> str:
        return (
            f'<article class="pr-card">'
            f"{self.render_state(pr.state)}"
            f'<div class="pr-card-title">{_link(pr.url, escape(pr.title))}</div>'
            f'<div class="pr-repo">{_link(owner_profile_url(pr), escape(pr.repository))}</div>'
            f'<div class="pr-card-footer">'
            f'<span class="pr-number">#{pr.number}</span>'
            f'<span class="pr-date">{escape(time_ago(pr.created_at, now))}</span>'
            f"</div>"
            f"</article>"
        )


STYLES = {style.name: style for style in (ListStyle(), CardGridStyle())}


def get_style(name: str) -> PageStyle:
    """Look up a style by name.

    Raises:
        ValueError: If the style is unknown
    """
    try:
        return STYLES[name]
    except KeyError:
        raise ValueError(
            f"Unknown render style: {name!r} (choose from {', '.join(STYLES)})"
        ) from None
