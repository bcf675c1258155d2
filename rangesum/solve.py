import argparse
import logging
import sys

from rangesum import transport
from rangesum.config import Settings
from rangesum.errors import RangeQueryError
from rangesum.payload import parse_payload
from rangesum.prefix import preprocess
from rangesum.resolve import resolve_all

logger = logging.getLogger(__name__)


def answer(payload):
    tables = preprocess(payload.data)
    return resolve_all(payload.queries, tables)


def solve(settings):
    """
    fetch -> preprocess -> resolve -> deliver. Any failure before the
    final POST means nothing is delivered.
    """
    payload = parse_payload(transport.fetch_input(settings.input_url, settings.timeout))
    logger.info(
        "Loaded %d values and %d queries", payload.data.size, len(payload.queries)
    )
    results = answer(payload)
    logger.debug("Results: %s", results)
    transport.deliver(settings.output_url, payload.token, results, settings.timeout)
    return results


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Answer range sum queries and post the results."
    )
    parser.add_argument(
        "--input-url",
        type=str,
        default=None,
        help="endpoint serving the token, data and queries",
    )
    parser.add_argument(
        "--output-url",
        type=str,
        default=None,
        help="endpoint receiving the answers",
    )
    args = parser.parse_args(argv)

    try:
        settings = Settings.from_env().with_urls(args.input_url, args.output_url)
    except ValueError as exc:
        parser.error(str(exc))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        solve(settings)
    except RangeQueryError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
