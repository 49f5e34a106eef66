import json
import logging
from typing import Optional
from pydantic import ValidationError

from datas import PageData
from models import PageDocument

logger = logging.getLogger(__name__)


def load_page(filepath) -> Optional[PageDocument]:
    """
    Loads a page description JSON file and validates it using the Pydantic model.
    Returns the PageDocument or None if loading or validation fails.
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            raw_data = json.load(f)
            logger.info(f"Page file '{filepath}' loaded.")
    except FileNotFoundError:
        logger.error(f"Page file not found: {filepath}")
        return None
    except json.JSONDecodeError as e:
        logger.error(f"Failed to decode JSON from {filepath}: {e}")
        return None

    try:
        page_data = PageData.model_validate(raw_data)
    except ValidationError as e:
        logger.error(f"Page validation failed for '{filepath}'. Errors:\n{e}")
        return None

    page = PageDocument.from_data(page_data)
    keyed = len(page.query_translatable())
    logger.info(f"Page '{page.title or filepath}' has {len(page.elements)} elements ({keyed} translatable).")
    return page
