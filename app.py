from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Mapping, Sequence

from flask import Flask, current_app, jsonify, request, send_from_directory
from werkzeug.exceptions import HTTPException

from energy_records.aggregates import (
    distinct_sources,
    max_by_state,
    min_by_state,
    most_used_source,
    total_by_producer,
    total_by_state_for_month,
)
from energy_records.models import EnergyProducer, EnergySource, ValidationError
from energy_records.parsing import (
    InputFormatError,
    RecordInputError,
    parse_int,
    read_record_from_form,
    seed_store,
)
from energy_records.reporting import (
    format_producer_totals,
    format_sources,
    record_rows,
    state_extremes,
)
from energy_records.store import RecordStore

APP_ROOT = Path(__file__).resolve().parent
STORE_KEY = "record_store"

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    "SEED_SAMPLE_DATA": True,
    "LOG_LEVEL": "INFO",
    "HOST": "127.0.0.1",
    "PORT": 5000,
}


def create_app(
    store: RecordStore | None = None,
    config: Mapping[str, object] | None = None,
) -> Flask:
    app = Flask(__name__, static_folder=None)
    app.config.update(DEFAULT_CONFIG)
    app.config.from_prefixed_env("ENERGY_RECORDS")
    if config:
        app.config.update(config)

    if store is None:
        store = RecordStore.with_sample_data() if app.config["SEED_SAMPLE_DATA"] else RecordStore()
    app.extensions[STORE_KEY] = store

    _register_routes(app)
    _register_error_handlers(app)
    return app


def _store() -> RecordStore:
    return current_app.extensions[STORE_KEY]


def _register_routes(app: Flask) -> None:
    @app.get("/")
    def index() -> object:
        return send_from_directory(APP_ROOT, "index.html")

    @app.get("/styles.css")
    def styles() -> object:
        return send_from_directory(APP_ROOT, "styles.css")

    @app.get("/api/options")
    def options() -> object:
        return jsonify(
            {
                "sources": [source.display_name for source in EnergySource],
                "producers": [producer.display_name for producer in EnergyProducer],
            }
        )

    @app.get("/api/records")
    def list_records() -> object:
        return jsonify({"records": record_rows(_store())})

    @app.post("/api/records")
    def add_record() -> object:
        record = read_record_from_form(request.form)
        _store().add(record)
        return jsonify({"record": record_rows([record])[0], "count": len(_store())}), 201

    @app.get("/api/sources")
    def sources() -> object:
        return jsonify({"sources": format_sources(distinct_sources(_store()))})

    @app.get("/api/producers/totals")
    def producer_totals() -> object:
        return jsonify({"producers": format_producer_totals(total_by_producer(_store()))})

    @app.get("/api/states/min")
    def state_minimums() -> object:
        return jsonify({"states": min_by_state(_store())})

    @app.get("/api/states/max")
    def state_maximums() -> object:
        return jsonify({"states": max_by_state(_store())})

    @app.get("/api/states/extremes")
    def extremes() -> object:
        return jsonify(
            {
                "states": [
                    {"state": item.state, "min": item.minimum, "max": item.maximum}
                    for item in state_extremes(_store())
                ]
            }
        )

    @app.get("/api/sources/most-used")
    def most_used() -> object:
        source = most_used_source(_store())
        if source is None:
            return jsonify({"source": None, "message": "No energy source data available"})
        return jsonify({"source": source.display_name})

    @app.get("/api/months/", defaults={"month": ""})
    @app.get("/api/months/<month>")
    def energy_by_month(month: str) -> object:
        try:
            parsed_month = parse_int(month, "month")
        except InputFormatError:
            return (
                jsonify({"error": "Invalid month input. Please enter a number between 1 and 12."}),
                400,
            )
        return jsonify(
            {"month": parsed_month, "states": total_by_state_for_month(_store(), parsed_month)}
        )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(RecordInputError)
    def handle_input_error(exc: RecordInputError) -> object:
        if exc.has_number_errors():
            message = "Invalid input! Ensure numeric fields are properly filled."
        else:
            message = "Invalid input! Unknown energy source or producer."
        return jsonify({"error": message, "details": exc.user_messages()}), 400

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError) -> object:
        return jsonify({"error": f"Invalid energy data: {exc}"}), 422

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException) -> object:
        return jsonify({"error": exc.description}), exc.code


def main(argv: Sequence[str] | None = None) -> None:
    args = list(sys.argv[1:] if argv is None else argv)
    app = create_app()
    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    seed_store(app.extensions[STORE_KEY], args)
    app.run(host=app.config["HOST"], port=int(app.config["PORT"]), threaded=False)


if __name__ == "__main__":
    main()
