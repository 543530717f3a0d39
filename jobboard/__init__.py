import logging

from flask import Flask, jsonify
from pymysql import connect
from sqlalchemy.engine import make_url
from werkzeug.exceptions import HTTPException

from config import Config, DEFAULT_SECRET_KEY
from .extensions import bcrypt, cors, db, jwt, migrate
from .errors import InternalError, JobBoardError
from . import models  # noqa: F401  registers tables on the metadata
from .routes.auth_routes import auth_bp
from .routes.job_routes import jobs_bp
from .routes.application_routes import applications_bp
from .database.seed.seed_all import create_tables, seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    if app.config["SECRET_KEY"] == DEFAULT_SECRET_KEY and not app.config.get("TESTING"):
        logger.warning("⚠️ Using the built-in fallback SECRET_KEY; set SECRET_KEY/JWT_SECRET_KEY in the environment")

    # Allow CORS from the web client
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)
    bcrypt.init_app(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(jobs_bp, url_prefix="/api/jobs")
    app.register_blueprint(applications_bp, url_prefix="/api/applications")

    register_error_handlers(app)

    @app.route("/", methods=["GET"])
    def index():
        return jsonify({
            "success": True,
            "message": "Welcome to the Job Portal API",
            "version": "1.0.0",
            "endpoints": {
                "auth": "/api/auth",
                "jobs": "/api/jobs",
                "applications": "/api/applications",
            },
        })

    app.cli.add_command(create_tables)
    app.cli.add_command(seed_all)

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    logging.getLogger("jobboard").setLevel(level)


def register_error_handlers(app):
    @app.errorhandler(JobBoardError)
    def handle_job_board_error(error):
        db.session.rollback()
        body = error.to_dict()
        if isinstance(error, InternalError) and app.config.get("EXPOSE_ERROR_DETAILS"):
            body["error"] = error.message
        return jsonify(body), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        message = "Route not found" if error.code == 404 else error.description
        return jsonify({"success": False, "message": message}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        db.session.rollback()
        logger.exception(f"❌ Unhandled error: {error}")
        body = {"success": False, "message": InternalError.message}
        if app.config.get("EXPOSE_ERROR_DETAILS"):
            body["error"] = str(error)
        return jsonify(body), 500


def create_database_if_not_exists(database_uri):
    url = make_url(database_uri)

    logger.info(f"🔧 Ensuring database '{url.database}' exists on {url.host}:{url.port or 3306}")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or ""
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
