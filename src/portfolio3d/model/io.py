"""
Input/Output Manager (JSON)
Loads the static portfolio content from a JSON file at startup.
"""
import json
import logging
import os

from portfolio3d.config import DEFAULT_CONTENT_PATH
from portfolio3d.model.content import ContentError, ContentModel

# Get module logger
logger = logging.getLogger(__name__)


class ContentIO:

    @staticmethod
    def load_content(filepath: str) -> ContentModel:
        logger.info(f"Loading content from: {filepath}")
        if not os.path.isfile(filepath):
            msg = f"Content file '{filepath}' does not exist."
            logger.error(msg)
            raise ContentError(msg)

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            msg = f"Content file '{filepath}' is not valid JSON: {e}"
            logger.error(msg)
            raise ContentError(msg) from e

        try:
            content = ContentModel.from_dict(data)
        except ContentError as e:
            logger.error(f"Invalid content in '{filepath}': {e}")
            raise

        logger.debug(
            f"Loaded profile '{content.profile.name}' with "
            f"{len(content.skills)} skills and {len(content.projects)} projects."
        )
        return content

    @staticmethod
    def load_default() -> ContentModel:
        """Loads the content bundled in the assets directory."""
        return ContentIO.load_content(DEFAULT_CONTENT_PATH)

