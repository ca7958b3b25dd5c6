"""Tests for first-match PMID extraction from search responses."""

from citefetch.search.extractor import extract_identifier
from citefetch.search.models import Found, NotFound

ESEARCH_XML = """<?xml version="1.0" encoding="UTF-8" ?>
<!DOCTYPE eSearchResult PUBLIC "-//NLM//DTD esearch 20060628//EN" "">
<eSearchResult><Count>1</Count><RetMax>1</RetMax><RetStart>0</RetStart><IdList>
<Id>12824337</Id>
</IdList><TranslationSet/></eSearchResult>
"""


def test_extracts_from_esearch_document():
    assert extract_identifier(ESEARCH_XML) == Found(pmid="12824337")


def test_mixed_case_tags():
    assert extract_identifier("<id>12345</Id>") == Found(pmid="12345")


def test_no_marker_is_not_found():
    result = extract_identifier("<eSearchResult><Count>0</Count><IdList/></eSearchResult>")
    assert isinstance(result, NotFound)


def test_empty_response_is_not_found():
    assert isinstance(extract_identifier(""), NotFound)


def test_first_match_wins():
    assert extract_identifier("<Id>1</Id>...<Id>2</Id>") == Found(pmid="1")


def test_non_digit_id_ignored():
    assert isinstance(extract_identifier("<Id>abc</Id>"), NotFound)
    assert extract_identifier("<Id></Id><Id>77</Id>") == Found(pmid="77")


def test_zero_id_is_not_found():
    assert isinstance(extract_identifier("<Id>0</Id>"), NotFound)


def test_non_ascii_digits_ignored():
    assert isinstance(extract_identifier("<Id>١٢٣</Id>"), NotFound)
    assert extract_identifier("<Id>١٢٣</Id><Id>456</Id>") == Found(pmid="456")
