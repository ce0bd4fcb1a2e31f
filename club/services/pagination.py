from __future__ import annotations

import logging
from typing import List, Tuple

from sqlalchemy.orm import Query

from club.core.config import settings

logger = logging.getLogger(__name__)


def normalize_page(page_index: int | None, page_size: int | None) -> Tuple[int, int]:
    index = int(page_index or 1)
    size = int(page_size or 0)
    if index < 1:
        index = 1
    if size < 1:
        size = settings.DEFAULT_PAGE_SIZE
    return index, min(size, settings.MAX_PAGE_SIZE)


def page_offset(page_index: int, page_size: int) -> int:
    return (page_index - 1) * page_size


def paginate(q: Query, page_index: int, page_size: int) -> Tuple[List, int]:
    """Count the filtered query, then fetch the requested window of it.

    The count runs on the unwindowed query so it reflects every filter but
    never the offset/limit of the page.
    """
    total = q.order_by(None).count()
    offset = page_offset(page_index, page_size)
    if total == 0 or offset >= total:
        return [], total
    rows = q.offset(offset).limit(page_size).all()
    logger.debug("paginate page=%s size=%s total=%s rows=%s", page_index, page_size, total, len(rows))
    return rows, total
