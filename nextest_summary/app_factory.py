#############################
#
# Composition root
# •	build_services() wires repository -> extractor -> batch runner for the CLI.
# •	create_app() builds the Flask app on top of the same services.
# •	Presentation (CLI controller / Flask blueprint)
#    |
#    v
# Service layer (SummaryExtractor, BatchRunner, output naming)
#    |
#    v
# Repository (ReportRepository: read / list / mkdir / write)
######################################################################
from __future__ import annotations

from typing import Optional, Tuple

from flask import Flask

from nextest_summary.config.ini_config import AppSettings, IniConfig
from nextest_summary.repositories.report_repository import ReportRepository
from nextest_summary.services.batch_runner import BatchRunner
from nextest_summary.services.summary_extractor import SummaryExtractor
from nextest_summary.web.routes import create_blueprint


def build_services() -> Tuple[SummaryExtractor, BatchRunner]:
    repo = ReportRepository()
    extractor = SummaryExtractor(repo=repo)
    return extractor, BatchRunner(extractor=extractor, repo=repo)


def create_app(settings: Optional[AppSettings] = None) -> Flask:
    if settings is None:
        settings = IniConfig.from_env_or_default().load_settings()

    extractor, _ = build_services()

    app = Flask(__name__)
    app.register_blueprint(create_blueprint(extractor, settings.reports_base))

    app.config["HOST"] = settings.flask_host
    app.config["PORT"] = settings.flask_port
    app.config["DEBUG"] = settings.flask_debug
    app.logger.setLevel(settings.log_level)

    return app
