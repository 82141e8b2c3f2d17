## routes.py
from __future__ import annotations

from pathlib import Path

from flask import Blueprint, Response, abort, current_app, request

from nextest_summary.domain.errors import ExtractError

UPLOAD_FIELD = "report"


def _plain(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _display(summary: str) -> str:
    return summary.rstrip() + "\n"


def create_blueprint(extractor, reports_base: Path) -> Blueprint:
    bp = Blueprint("web", __name__)

    @bp.get("/health")
    def health():
        return _plain("ok")

    @bp.post("/summary")
    def summarize_upload():
        source = Path("<request body>")
        if request.mimetype == "multipart/form-data":
            upload = request.files.get(UPLOAD_FIELD)
            if upload is None:
                return _plain(f"missing form field '{UPLOAD_FIELD}'", 400)
            raw = upload.read()
            if upload.filename:
                source = Path(upload.filename)
        else:
            raw = request.get_data()

        if not raw:
            return _plain("empty report", 400)
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError:
            return _plain("report is not valid UTF-8 text", 400)

        try:
            summary = extractor.extract_text(text, source)
        except ExtractError as e:
            current_app.logger.info("Rejected upload: %s", e)
            return _plain(str(e), 422)
        return _plain(_display(summary))

    @bp.get("/summary/<filename>")
    def summarize_stored(filename: str):
        base = Path(reports_base).resolve()
        full = (base / filename).resolve()
        if base not in full.parents:
            abort(403)
        if not full.is_file():
            abort(404)

        try:
            summary = extractor.extract(full)
        except ExtractError as e:
            current_app.logger.info("Extraction failed for %s: %s", full, e)
            return _plain(str(e), 422)
        return _plain(_display(summary))

    return bp
