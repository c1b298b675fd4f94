# ledger_backend/errors.py
import logging
import sqlite3

from flask import jsonify

logger = logging.getLogger("ledger-backend")


def register_error_handlers(app):
    @app.errorhandler(404)
    def not_found(e): return jsonify(error="not_found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e): return jsonify(error="method_not_allowed"), 405

    @app.errorhandler(500)
    def server_error(e): return jsonify(error="server_error"), 500

    @app.errorhandler(sqlite3.Error)
    def store_error(e):
        logger.exception(f"Store error: {e}")
        return jsonify(error="server_error"), 500
