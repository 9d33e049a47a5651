# backend/laundry/__init__.py
from flask import Flask, request

from .config import Config
from .extensions import db, migrate


def _build_record_store(app: Flask):
    from .services.kv_store import MemoryKeyValueStore, SqlKeyValueStore
    from .services.record_store import RecordStore

    backend_name = app.config.get("STORAGE_BACKEND", "sql")
    if backend_name == "memory":
        return RecordStore(MemoryKeyValueStore())
    if backend_name == "sql":
        return RecordStore(SqlKeyValueStore())
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend_name!r}")


def create_app(test_config: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    # One record store per application; routes reach it via get_record_store()
    app.extensions["record_store"] = _build_record_store(app)

    # Register blueprints
    from .routes.system import system_bp
    from .routes.auth import auth_bp
    from .routes.outlets import outlets_bp
    from .routes.products import products_bp
    from .routes.customers import customers_bp
    from .routes.users import users_bp
    from .routes.laundry_items import laundry_items_bp
    from .routes.transactions import transactions_bp
    from .routes.dashboard import dashboard_bp
    from .routes.reports import reports_bp
    from .routes.track import track_bp

    app.register_blueprint(system_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(outlets_bp)
    app.register_blueprint(products_bp)
    app.register_blueprint(customers_bp)
    app.register_blueprint(users_bp)
    app.register_blueprint(laundry_items_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(track_bp)

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        allowed_origins = {
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:4173",
            "http://127.0.0.1:4173",
        }
        if origin in allowed_origins:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
            response.headers["Access-Control-Allow-Headers"] = "Authorization, Content-Type"
            response.headers["Access-Control-Allow-Methods"] = "GET,POST,PUT,DELETE,PATCH,OPTIONS"
        return response

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    if app.config.get("SEED_ON_STARTUP"):
        from .services.seed_service import initialize_data
        with app.app_context():
            db.create_all()
            initialize_data(app.extensions["record_store"])

    return app
