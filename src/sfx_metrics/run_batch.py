import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from sfx_metrics.errors import ValidationError
from sfx_metrics.models.config import FormatterConfig
from sfx_metrics.models.event import LoggerContext
from sfx_metrics.services.formatter import SignalfxFormatter
from sfx_metrics.utils.utils import load_events

logger = structlog.get_logger(__name__)


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="sfx-batch",
        description="Format logged events as a SignalFx metrics payload",
    )
    parser.add_argument("events_file", help="JSON array or JSON-lines file of events")
    parser.add_argument("--host", help="host dimension of the emitting logger")
    parser.add_argument("--application", help="application dimension of the emitting logger")
    parser.add_argument("--single", action="store_true", help="one payload per event, no aggregation")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = FormatterConfig.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {str(e)}")
        return 1

    try:
        text = Path(args.events_file).read_text()
        events = load_events(text)
    except ValidationError as e:
        logger.error(f"Invalid event: {e}")
        return 1
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to load events from {args.events_file}: {str(e)}")
        return 1

    logger.info(f"Loaded {len(events)} events from {args.events_file}")
    formatter = SignalfxFormatter(config)
    context = LoggerContext(host=args.host, application=args.application)

    if args.single:
        for event in events:
            print(formatter.call(event, context))
    else:
        print(formatter.batch(events, context))
    return 0


if __name__ == "__main__":
    sys.exit(main())
