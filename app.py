import logging

from flask import Flask, jsonify

from config import Settings, db, get_settings, init_firebase
from controllers.auth_controller import auth_bp
from controllers.users_controller import users_bp
from controllers.reports_controller import reports_bp
from controllers.sightings_controller import sightings_bp

# table definitions must be imported before create_all()
import models.user_model  # noqa: F401
import models.report_model  # noqa: F401
import models.sighting_model  # noqa: F401


# Create and configure the Flask application
def create_app(settings: Settings | None = None):
    settings = settings or get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)
    app.config["SETTINGS"] = settings
    app.config["SQLALCHEMY_DATABASE_URI"] = settings.database_url
    app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
        "pool_pre_ping": True,
        "pool_recycle": settings.db_pool_recycle,
    }
    app.logger.setLevel(settings.log_level.upper())

    db.init_app(app)
    init_firebase(settings)

    prefix = settings.api_prefix
    app.register_blueprint(auth_bp, url_prefix=f"{prefix}/auth")
    app.register_blueprint(users_bp, url_prefix=f"{prefix}/users")
    app.register_blueprint(reports_bp, url_prefix=prefix)
    app.register_blueprint(sightings_bp, url_prefix=prefix)

    @app.errorhandler(404)
    def not_found(e):
        return jsonify(error="Not Found"), 404

    @app.errorhandler(405)
    def method_not_allowed(e):
        return jsonify(error="Method Not Allowed"), 405

    with app.app_context():
        db.create_all()

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config["SETTINGS"].debug, port=3000)
