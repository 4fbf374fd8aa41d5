from __future__ import annotations

import logging
import sqlite3

from flask import Flask
from sqlalchemy import event
from sqlalchemy.engine import Engine

from .extensions import db, migrate


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, connection_record) -> None:
    if isinstance(dbapi_connection, sqlite3.Connection):
        cur = dbapi_connection.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.execute("PRAGMA journal_mode=WAL")
        cur.execute("PRAGMA synchronous=NORMAL")
        cur.execute("PRAGMA busy_timeout=30000")
        cur.close()


def _configure_logging(app: Flask) -> None:
    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("app").setLevel(level)


def create_app(config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object("config.Config")
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)

    uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if uri.startswith("sqlite:"):
        opts = dict(app.config.get("SQLALCHEMY_ENGINE_OPTIONS", {}))
        ca = dict(opts.get("connect_args", {}))
        ca.setdefault("check_same_thread", False)
        ca.setdefault("timeout", 30)
        opts["connect_args"] = ca
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = opts

    db.init_app(app)
    migrate.init_app(app, db)

    from .models.owner import Owner
    from .models.pet import Pet

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .pets.routes import pets_bp
    app.register_blueprint(pets_bp)

    from .owners.routes import owners_bp
    app.register_blueprint(owners_bp)

    from .cli import init_db_cmd, reset_db_cmd, seed_demo_cmd, delete_pet_cmd

    app.cli.add_command(init_db_cmd)
    app.cli.add_command(reset_db_cmd)
    app.cli.add_command(seed_demo_cmd)
    app.cli.add_command(delete_pet_cmd)

    @app.get("/")
    def index():
        return {
            "pets": Pet.query.count(),
            "owners": Owner.query.count(),
        }

    @app.teardown_request
    def _teardown_request(_exc):
        try:
            if _exc is not None:
                db.session.rollback()
        finally:
            db.session.remove()

    return app
