# ledger_backend/app.py

import atexit
import logging

from flask import Flask, jsonify
from flask_cors import CORS

from . import auth, transactions
from .config import Settings
from .db import Store
from .errors import register_error_handlers
from .security import jwt

logger = logging.getLogger("ledger-backend")


# ---------------- Flask App Factory ----------------
def create_app(settings=None, store=None):
    """
    Build the application.

    The store is injected when the caller owns its lifecycle (the run
    entrypoint, tests); otherwise one is opened from settings.db_path.
    """
    if settings is None:
        settings = Settings.from_env()

    app = Flask(__name__)
    app.config.from_mapping(settings.flask_config())
    jwt.init_app(app)

    # CORS
    CORS(app, resources={r"/*": {"origins": list(settings.cors_origins)}}, supports_credentials=True)

    # Store
    if store is None:
        store = Store(settings.db_path)
        atexit.register(store.close)
    store.init_db()
    app.extensions["store"] = store
    logger.info("Database initialized")

    # Blueprints
    app.register_blueprint(auth.auth_bp)
    app.register_blueprint(transactions.bp)
    register_error_handlers(app)

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    return app


# ---------------- Run ----------------
def main():
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting with settings: {settings.as_dict()}")

    store = Store(settings.db_path)
    atexit.register(store.close)

    app = create_app(settings, store)
    logger.info(f"Server Running at http://{settings.host}:{settings.port}/")
    app.run(host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
