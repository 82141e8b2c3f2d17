# calls services, handles exit codes/logging
from __future__ import annotations

import configparser
import logging
import sys
from typing import List, Optional

from nextest_summary.app_factory import build_services, create_app
from nextest_summary.cli.args import build_parser
from nextest_summary.config.ini_config import AppSettings, IniConfig
from nextest_summary.domain.errors import SummaryError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def _load_settings(ini: Optional[str]) -> AppSettings:
    return IniConfig.from_env_or_default(ini).load_settings()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = _load_settings(args.ini)
    except (OSError, ValueError, configparser.Error) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    setup_logging(args.log_level or settings.log_level)

    if args.command == "serve":
        app = create_app(settings)
        app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
        return 0

    extractor, batch_runner = build_services()
    try:
        if args.command == "show":
            summary = extractor.extract(args.infile)
            print(summary.rstrip())
        else:
            result = batch_runner.run(args.indir, args.outdir)
            logger.info("Wrote %d summaries, skipped %d entries", len(result.written), len(result.skipped))
    except SummaryError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    return 0
