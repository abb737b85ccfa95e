"""Read and write the portfolio document (data/prs.json).

The JSON file is the only thing shared between the fetch step and the
page renderer. Writes replace the file atomically so a reader never sees
a half-written document.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from models.data_models import ContributionDocument

logger = logging.getLogger(__name__)


def save_document(document: ContributionDocument, path: Path) -> None:
    """Write the document, replacing any previous one.

    Creates parent directories as needed. The JSON is written to a
    temporary file next to the destination and then moved into place.

    Args:
        document: Document to persist
        path: Destination path (e.g., data/prs.json)

    Raises:
        OSError: If the directory or file cannot be written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = document.model_dump_json(by_alias=True, indent=2)

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.write("\n")
        os.replace(tmp_name, path)
    except BaseException:
        # Leave the previous document untouched
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise

    logger.info(f"Saved {len(document.records)} PRs to {path}")


def load_document(path: Path) -> Optional[ContributionDocument]:
    """Load the document for rendering.

    A missing, unreadable or invalid file is not an error for the page:
    it is the "no data yet" state, so this returns None instead of raising.

    Args:
        path: Location of prs.json

    Returns:
        Validated ContributionDocument, or None
    """
    path = Path(path)
    if not path.exists():
        logger.info(f"{path} not found.")
        return None

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return ContributionDocument.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        # ValueError covers bad JSON and undecodable bytes
        logger.warning(f"Error loading or parsing {path}: {e}")
        return None
