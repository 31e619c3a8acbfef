from flask import Flask, jsonify, render_template
from werkzeug.exceptions import HTTPException

from locallibrary.config import Config
from locallibrary.extensions import db, migrate

from locallibrary.controllers.bookinstance_controller import bookinstance_bp
from locallibrary.controllers.catalog_controller import catalog_bp
from locallibrary.repositories.book_repo import BookRepo
from locallibrary.repositories.bookinstance_repo import BookInstanceRepo
from locallibrary.services.bookinstance_service import BookInstanceService
from locallibrary.services.catalog_service import CatalogService
from locallibrary.utils import formatting


def create_app(config_object=Config, **overrides):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.config.update(overrides)
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # 1) Extensions
    db.init_app(app)
    migrate.init_app(app, db)

    # 2) Handlers get their repositories here
    instances, books = BookInstanceRepo(), BookRepo()
    app.extensions["locallibrary.bookinstances"] = BookInstanceService(instances, books)
    app.extensions["locallibrary.catalog"] = CatalogService(instances, books)

    # 3) Template helpers for derived fields
    app.jinja_env.filters["bookinstance_url"] = formatting.bookinstance_url
    app.jinja_env.filters["book_url"] = formatting.book_url
    app.jinja_env.filters["due_back_formatted"] = formatting.due_back_formatted
    app.jinja_env.filters["due_back_formatted_update"] = formatting.due_back_formatted_update

    # 4) Blueprints
    app.register_blueprint(catalog_bp)
    app.register_blueprint(bookinstance_bp)

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    # 5) Error pages
    @app.errorhandler(HTTPException)
    def http_error(e):
        return render_template("error.html", title=e.name, message=e.description, status=e.code), e.code

    @app.errorhandler(Exception)
    def unhandled_error(e):
        db.session.rollback()
        app.logger.exception(f"[app] unhandled error: {e}")
        return render_template("error.html", title="Error", message="Internal Server Error", status=500), 500

    # 6) CLI
    from locallibrary.commands import init_db_command, seed_demo_command
    app.cli.add_command(init_db_command)
    app.cli.add_command(seed_demo_command)

    app.logger.debug(f"[app] blueprints registered: {', '.join(app.blueprints)}")
    return app
