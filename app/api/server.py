"""JSON read API: GET /raffles, GET /rafflebuyers/<raffle_id>, GET /health.

Run with:
    python app/api/server.py
"""

from __future__ import annotations

import os
import sys
from typing import Optional

# Same flat import path as app/app.py
APP_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if APP_DIR not in sys.path:
    sys.path.insert(0, APP_DIR)

from flask import Blueprint, Flask, current_app, jsonify  # noqa: E402

from config import AppConfig, get_config  # noqa: E402
from data.connection import MongoStore  # noqa: E402
from data.service import DataResult, list_buyers, list_raffles  # noqa: E402
from log import get_logger, setup_logger  # noqa: E402


logger = get_logger(__name__)

api_bp = Blueprint("api", __name__)


def _settings() -> tuple[AppConfig, bool, Optional[MongoStore]]:
    return (
        current_app.config["RAFFLE_CONFIG"],
        current_app.config["USE_MOCK"],
        current_app.config.get("STORE"),
    )


def _respond(result: DataResult):
    if not result.ok:
        logger.error("Read failed: %s", result.error)
        return jsonify({"error": result.error}), 500
    # Pass-through: the documents as read, not the DataFrame built from them
    return jsonify(result.records), 200


@api_bp.route("/raffles")
def raffles():
    cfg, use_mock, store = _settings()
    return _respond(list_raffles(cfg, use_mock, store=store))


@api_bp.route("/rafflebuyers/<raffle_id>")
def raffle_buyers(raffle_id: str):
    # Returns what the store returns; the buyers page applies scope_buyers
    cfg, use_mock, store = _settings()
    return _respond(list_buyers(cfg, use_mock, raffle_id, store=store))


@api_bp.route("/health")
def health():
    _, use_mock, _ = _settings()
    return jsonify({"status": "ok", "source": "mock" if use_mock else "mongodb"})


def create_app(cfg: AppConfig, use_mock: Optional[bool] = None, store: Optional[MongoStore] = None) -> Flask:
    """Create the Flask app.

    Args:
        cfg: Application configuration
        use_mock: Serve mock data instead of MongoDB (defaults to cfg.default_use_mock)
        store: Store override (tests)
    """
    app = Flask(__name__)
    app.config["RAFFLE_CONFIG"] = cfg
    app.config["USE_MOCK"] = cfg.default_use_mock if use_mock is None else use_mock
    app.config["STORE"] = store
    app.json.sort_keys = False
    app.register_blueprint(api_bp)

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        logger.error("Internal server error: %s", error)
        return jsonify({"error": "Internal server error"}), 500

    return app


def main() -> None:
    cfg = get_config()
    setup_logger(level=cfg.log_level, log_file=cfg.log_file)
    create_app(cfg).run(host=cfg.api_host, port=cfg.api_port)


if __name__ == "__main__":
    main()
