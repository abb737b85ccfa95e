#!/usr/bin/env python3
"""
PR Portfolio - Main CLI entrypoint

Fetches a GitHub user's pull requests into data/prs.json and renders
them as a static HTML portfolio page.

Usage:
    python main.py fetch                      # Fetch PRs (GITHUB_TOKEN required)
    python main.py build                      # Write dist/index.html
    python main.py build --style cards        # Card grid layout
    python main.py serve --port 8000          # Serve the page with uvicorn
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from models.config_models import Config
from models.data_models import ContributionDocument
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = logging.getLogger(__name__)

DEFAULT_BUILD_OUTPUT = Path("dist/index.html")


def initialize_fetcher(config: Config):
    """
    Create the GitHub fetcher from config.

    Args:
        config: Config object with credentials

    Returns:
        GitHubFetcher instance

    Raises:
        ValueError: If the GitHub token is missing
    """
    if not config.credentials.github_token:
        raise ValueError(
            "GitHub token not set. "
            "Add GITHUB_TOKEN to your .env file or the workflow environment."
        )
    from fetchers.github import GitHubFetcher
    return GitHubFetcher(config.credentials.github_token, timeout=config.fetch.timeout)


def fetch_prs(
    config: Config,
    fetcher=None,
    output_path: Optional[Path] = None
) -> ContributionDocument:
    """
    Fetch the user's PRs from GitHub and save them to the data file.

    Nothing is written unless both API calls succeed, so a failed run
    leaves the previous document in place.

    Args:
        config: Validated application config
        fetcher: GitHubFetcher instance (optional, created from config if not provided)
        output_path: Where to write the document (default: config.data_path)

    Returns:
        The saved ContributionDocument

    Raises:
        ValueError: If the GitHub token is missing
        requests.RequestException: If a GitHub API call fails
        OSError: If the document cannot be written
    """
    from fetchers.github import fetch_contributions, log_fetch_summary
    from storage.document_store import save_document

    if fetcher is None:
        fetcher = initialize_fetcher(config)
    output_path = output_path or config.data_path

    logger.info("=" * 80)
    logger.info(f"FETCHING PRs FOR: {config.fetch.username}")
    logger.info("=" * 80)

    document = fetch_contributions(fetcher, config.fetch)
    save_document(document, output_path)
    log_fetch_summary(document)

    return document


def build_page(config: Config, output_path: Path = DEFAULT_BUILD_OUTPUT) -> Path:
    """
    Render the portfolio page to a static HTML file.

    Args:
        config: Validated application config
        output_path: HTML file to write (default: dist/index.html)

    Returns:
        Path of the written file
    """
    from renderer import render_page
    from storage.document_store import load_document

    document = load_document(config.data_path)
    html = render_page(document, style=config.render.style)

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")

    if document is None:
        logger.warning(f"No PR data at {config.data_path}; wrote the empty page")
    logger.info(f"✓ Wrote {output_path}")
    return output_path


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="PR Portfolio - Show off your GitHub pull requests",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fetch PRs for TARGET_USERNAME (or GITHUB_ACTOR)
  python main.py fetch

  # Build the static page with the card layout
  python main.py build --style cards

  # Serve the page locally
  python main.py serve --port 8080
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Fetch PRs from GitHub into the data file"
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Where to write the JSON document (default: data/prs.json or PRS_DATA_PATH)"
    )

    build_parser = subparsers.add_parser(
        "build",
        help="Render the portfolio page to a static HTML file"
    )
    build_parser.add_argument(
        "--style",
        choices=["list", "cards"],
        default=None,
        help="Page layout (default: list or RENDER_STYLE)"
    )
    build_parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_BUILD_OUTPUT,
        help="HTML file to write (default: dist/index.html)"
    )

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the portfolio page"
    )
    serve_parser.add_argument(
        "--style",
        choices=["list", "cards"],
        default=None,
        help="Page layout (default: list or RENDER_STYLE)"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the server on (default: 8000)"
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = load_config()
    setup_logger(config.log_level)

    if getattr(args, "style", None):
        config.render.style = args.style

    if args.command == "fetch":
        logger.info("Starting PR fetch process...")
        try:
            fetch_prs(config, output_path=args.output)
        except Exception as e:
            logger.error(f"✗ Error fetching PRs: {e}")
            sys.exit(1)
        logger.info("PR fetch process completed successfully!")
        sys.exit(0)

    elif args.command == "build":
        try:
            build_page(config, output_path=args.output)
        except Exception as e:
            logger.error(f"✗ Failed to build page: {e}")
            sys.exit(1)
        sys.exit(0)

    elif args.command == "serve":
        from backend.app import create_app

        logger.info("=" * 80)
        logger.info("Starting PR Portfolio server")
        logger.info("=" * 80)
        logger.info(f"Page will be available at: http://{args.host}:{args.port}/")
        logger.info("Press Ctrl+C to stop the server")
        logger.info("=" * 80)

        import uvicorn
        uvicorn.run(
            create_app(config),
            host=args.host,
            port=args.port,
            log_level="info"
        )
        sys.exit(0)


if __name__ == "__main__":
    main()
