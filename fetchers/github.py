"""GitHub API client for fetching a user's pull request history.

The fetch is deliberately small:
- One profile lookup (GET /users/{username}) to confirm the account
- One search request (GET /search/issues) for the first 100 PRs

There is no pagination beyond page 1; 100 PRs is plenty for a portfolio page.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Optional

import requests

from models.config_models import FetchConfig
from models.data_models import ContributionDocument, PullRequestRecord, UserProfile

logger = logging.getLogger(__name__)

SEARCH_PAGE_SIZE = 100

# Headers worth echoing when a request fails
_DIAGNOSTIC_HEADERS = (
    "X-RateLimit-Limit",
    "X-RateLimit-Remaining",
    "X-RateLimit-Reset",
    "X-RateLimit-Resource",
    "X-GitHub-Request-Id",
)


class GitHubFetcher:
    """Fetch profile and pull request search data from GitHub API."""

    def __init__(self, token: str, timeout: float = 30.0):
        """Initialize GitHub API client.

        Args:
            token: GitHub token for authentication
            timeout: Request timeout in seconds
        """
        self.token = token
        self.timeout = timeout
        self.base_url = "https://api.github.com"
        self.headers = {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {token}",
            "X-GitHub-Api-Version": "2022-11-28"
        }

    def _make_github_request(self, url: str, params: Optional[dict] = None) -> requests.Response:
        """Make a GitHub API request and raise on any HTTP error.

        Failures are logged with status, rate limit headers and body
        before the exception propagates. There is no retry.

        Args:
            url: GitHub API URL to request
            params: Optional query parameters

        Returns:
            Successful response object from requests

        Raises:
            requests.HTTPError: On any non-2xx response
            requests.RequestException: On connection errors
        """
        try:
            response = requests.get(url, headers=self.headers, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"Request to {url} failed: {e}")
            raise

        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        if response.status_code >= 400:
            headers = {
                name: response.headers[name]
                for name in _DIAGNOSTIC_HEADERS
                if name in response.headers
            }
            logger.error(f"GitHub API error {response.status_code} for {url}")
            logger.error(f"Response headers: {headers}")
            logger.error(f"Response body: {response.text[:500]}")

        response.raise_for_status()
        return response

    def fetch_user(self, username: str) -> UserProfile:
        """Look up the account profile.

        A failure here aborts the whole fetch: without a confirmed login
        the search query cannot be trusted to target the right account.

        Args:
            username: GitHub login to look up

        Returns:
            UserProfile with display name falling back to the login

        Raises:
            requests.HTTPError: On authentication errors or other HTTP errors
        """
        logger.info(f"Fetching user info for: {username}")
        url = f"{self.base_url}/users/{username}"

        try:
            response = self._make_github_request(url)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 401:
                logger.error("This might be a GITHUB_TOKEN permissions issue.")
                logger.error(
                    "If running in GitHub Actions, make sure the workflow grants: "
                    "pull-requests: read, contents: read"
                )
            raise

        data = response.json()
        user = UserProfile(
            login=data["login"],
            name=data.get("name") or data["login"],
            avatar_url=data.get("avatar_url") or "",
        )

        logger.info(f"User info fetched: {user.name} (@{user.login})")
        return user

    def search_pull_requests(self, query: str) -> dict[str, Any]:
        """Run one search for pull requests (page 1, up to 100 results).

        Args:
            query: Search query, see build_search_query()

        Returns:
            Raw search response dict with "total_count" and "items"

        Raises:
            requests.HTTPError: On rate limiting, permission or other HTTP errors
        """
        logger.info(f"Search query: {query}")
        url = f"{self.base_url}/search/issues"
        params = {
            "q": query,
            "per_page": SEARCH_PAGE_SIZE,
            "page": 1,
            "advanced_search": "true",
        }

        try:
            response = self._make_github_request(url, params=params)
        except requests.HTTPError as e:
            if e.response is not None and e.response.status_code == 403:
                logger.error("This might be a rate limiting issue or insufficient permissions.")
                logger.error("Check if your GITHUB_TOKEN has the necessary permissions.")
            raise

        data = response.json()
        logger.info(
            f"Found {data.get('total_count', 0)} total PRs, "
            f"processing {len(data.get('items', []))} items"
        )
        return data


def build_search_query(username: str, include_own_prs: bool = False) -> str:
    """Build the search query for PRs authored by a user.

    Examples:
        build_search_query("octocat") -> 'type:pr author:"octocat" -user:"octocat"'
        build_search_query("octocat", True) -> 'type:pr author:"octocat"'
    """
    query = f'type:pr author:"{username}"'
    if not include_own_prs:
        query += f' -user:"{username}"'
    return query


def repository_from_url(repository_url: str) -> str:
    """Trim an API repository URL to "owner/name".

    "https://api.github.com/repos/facebook/react" -> "facebook/react"
    """
    return "/".join(repository_url.split("/")[-2:])


def _merged_at(item: dict[str, Any]) -> Optional[str]:
    return (item.get("pull_request") or {}).get("merged_at")


def should_keep(item: dict[str, Any]) -> bool:
    """Drop PRs that were closed without being merged."""
    return not (item.get("state") == "closed" and _merged_at(item) is None)


def to_record(item: dict[str, Any]) -> PullRequestRecord:
    """Convert one search result item into a PullRequestRecord.

    The state is "merged" whenever a merge timestamp exists, regardless
    of the raw state field.
    """
    return PullRequestRecord(
        repository=repository_from_url(item["repository_url"]),
        title=item["title"],
        url=item["html_url"],
        created_at=item["created_at"],
        state="merged" if _merged_at(item) is not None else item["state"],
        number=item["number"],
    )


def normalize_items(items: list[dict[str, Any]]) -> list[PullRequestRecord]:
    """Filter and convert search items, preserving API order."""
    return [to_record(item) for item in items if should_keep(item)]


def fetch_contributions(fetcher: GitHubFetcher, fetch_config: FetchConfig) -> ContributionDocument:
    """Fetch a user's PRs and assemble the portfolio document.

    The profile lookup must finish first since the search query uses the
    confirmed login. Any failure propagates; no partial document is built.

    Args:
        fetcher: GitHubFetcher instance
        fetch_config: Target account and query options

    Returns:
        ContributionDocument ready to be saved

    Raises:
        requests.RequestException: If either API call fails
    """
    user = fetcher.fetch_user(fetch_config.username)
    logger.info(f"Fetching PRs for user: {user.login}")

    query = build_search_query(user.login, fetch_config.include_own_prs)
    data = fetcher.search_pull_requests(query)

    records = normalize_items(data.get("items", []))

    return ContributionDocument(
        user=user.login,
        display_name=user.name,
        avatar_url=user.avatar_url,
        fetched_at=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        total_count=data.get("total_count", 0),
        records=records,
    )


def log_fetch_summary(document: ContributionDocument, sample_size: int = 3) -> None:
    """Log counts by state and the first few PRs of a fetched document."""
    records = document.records
    merged = sum(1 for pr in records if pr.state == "merged")
    open_count = sum(1 for pr in records if pr.state == "open")
    closed = sum(1 for pr in records if pr.state == "closed")

    logger.info("Statistics:")
    logger.info(f"   Merged: {merged}")
    logger.info(f"   Open: {open_count}")
    logger.info(f"   Closed: {closed}")
    logger.info(f"   Total: {len(records)} (API reported {document.total_count})")

    if records:
        logger.info("Sample PRs:")
        for index, pr in enumerate(records[:sample_size], start=1):
            logger.info(
                f"   {index}. [{pr.state.upper()}] {pr.repository}#{pr.number}: {pr.title}"
            )
