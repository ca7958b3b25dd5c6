#!/usr/bin/env python3
"""Fetch a citation record by PMID or by journal/volume/page."""

import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on sys.path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from citefetch.core.config import ServiceConfig, load_service_config
from citefetch.core.errors import ConfigError, TransportError, ValidationError
from citefetch.core.pipeline import CitationFetcher
from citefetch.search.models import CitationQuery, Retrieval

logger = logging.getLogger("fetch_citation")


def fetch(args: argparse.Namespace, config: ServiceConfig) -> Retrieval:
    with CitationFetcher(config) as fetcher:
        if args.pmid is not None:
            return fetcher.retrieve_by_id(args.pmid, timeout=args.timeout)
        query = CitationQuery(journal=args.journal, volume=args.volume, page=args.page)
        return fetcher.retrieve_by_query(query, timeout=args.timeout)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--pmid", help="Known PubMed identifier")
    parser.add_argument("--journal", help="Journal title abbreviation, e.g. 'Nucl Acids Res'")
    parser.add_argument("--volume")
    parser.add_argument("--page")
    parser.add_argument("--config", help="Service config YAML (default: config/services.yaml)")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.pmid is None and args.journal is None:
        parser.error("give --pmid, or --journal with --volume and --page")
    if args.pmid is not None and args.journal is not None:
        parser.error("--pmid and --journal are mutually exclusive")

    if args.pmid is None:
        args.volume = args.volume or ""
        args.page = args.page or ""

    try:
        config = load_service_config(args.config)
        result = fetch(args, config)
    except (ConfigError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except TransportError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if result.found:
        logger.info("Retrieved record for PMID %s", result.pmid)
    else:
        logger.info("No record matched")
    print(result.message)
    return 0


if __name__ == "__main__":
    sys.exit(main())
