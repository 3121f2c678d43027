"""Load the course structure from a JSON file."""

import json
import logging
from pathlib import Path

from core.catalog.types import Course
from core.config import get_content_path

from .parser import parse_course_tree

logger = logging.getLogger(__name__)


def load_course_tree(path: Path | None = None) -> dict[str, Course]:
    """
    Load and parse the course structure.

    Args:
        path: JSON file to read. Defaults to CONTENT_PATH from config.

    Returns:
        Ordered mapping of course key to Course

    Raises:
        FileNotFoundError: If the file doesn't exist
        ContentFormatError: If the structure has the wrong shape
    """
    content_path = Path(path) if path else get_content_path()

    if not content_path.exists():
        raise FileNotFoundError(f"Course structure not found: {content_path}")

    with open(content_path, encoding="utf-8") as f:
        raw = json.load(f)

    courses = parse_course_tree(raw)
    logger.info(f"Loaded {len(courses)} courses from {content_path}")
    return courses
