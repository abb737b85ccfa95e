"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import (
    DEFAULT_DATA_PATH,
    Config,
    CredentialsConfig,
    FetchConfig,
    RenderConfig,
)


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Reads from .env file in the project root and validates all
    credentials and settings using Pydantic models. This is called once
    at startup; the resulting Config is passed to the fetch and render
    steps instead of them reading the environment themselves.

    Returns:
        Config: Validated configuration object

    Raises:
        SystemExit: If configuration is invalid
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    try:
        config = Config(
            credentials=CredentialsConfig(
                github_token=os.getenv("GITHUB_TOKEN"),
            ),
            fetch=FetchConfig(
                target_username=os.getenv("TARGET_USERNAME"),
                github_actor=os.getenv("GITHUB_ACTOR"),
                include_own_prs=os.getenv("INCLUDE_OWN_PRS", "false").lower() == "true",
            ),
            render=RenderConfig(
                style=os.getenv("RENDER_STYLE", "list"),
            ),
            data_path=os.getenv("PRS_DATA_PATH") or DEFAULT_DATA_PATH,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )

        return config

    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Missing or invalid fields:", file=sys.stderr)

        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)

        print("\nHint: Copy .env.example to .env and fill in your credentials.", file=sys.stderr)
        sys.exit(1)
