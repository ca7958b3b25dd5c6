"""First-match PMID extraction from a search service response."""

import logging
import re

from citefetch.search.models import LEGACY_SENTINEL, Found, NotFound, Resolution

logger = logging.getLogger(__name__)

_ID_MARKER = re.compile(r"<Id>([0-9]+)</Id>", re.IGNORECASE)


def extract_identifier(text: str) -> Resolution:
    """Return the first ``<Id>digits</Id>`` value, or NotFound.

    Later markers are ignored. A missing marker is a normal outcome.
    """
    match = _ID_MARKER.search(text)
    if match is None:
        logger.debug("No <Id> marker in %d-char search response", len(text))
        return NotFound()

    pmid = match.group(1)
    if pmid == LEGACY_SENTINEL:
        return NotFound()
    return Found(pmid=pmid)
