"""URL construction for the search and record services."""

import re

from citefetch.core.config import ServiceConfig
from citefetch.search.models import CitationQuery

_WHITESPACE_RUN = re.compile(r"[ \t]+")


# ── Term Encoding ────────────────────────────────────────────────────


def encode_term(text: str) -> str:
    """Replace each run of spaces/tabs with a single ``%20``.

    Nothing else is escaped: the search template supplies its own literal
    ``&``, ``[`` and ``]`` delimiters around each field.
    """
    return _WHITESPACE_RUN.sub("%20", text)


# ── URL Templates ────────────────────────────────────────────────────


def build_search_term(query: CitationQuery) -> str:
    """Field-tagged PubMed term, e.g. ``Science[ta]300[vi]1234[pg]``."""
    journal = encode_term(query.journal)
    volume = encode_term(query.volume)
    page = encode_term(query.page)
    return f"{journal}[ta]{volume}[vi]{page}[pg]"


def build_search_url(config: ServiceConfig, query: CitationQuery) -> str:
    url = f"{config.search_base}?db=pubmed&retmax=1&term={build_search_term(query)}"
    if config.tool:
        url += f"&tool={encode_term(config.tool)}"
    if config.email:
        url += f"&email={encode_term(config.email)}"
    return url


def build_record_url(config: ServiceConfig, pmid: str) -> str:
    return f"{config.record_base}?uids={pmid}"
