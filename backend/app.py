import logging
import os

from dotenv import load_dotenv
from flasgger import Swagger
from flask import Flask, jsonify
from flask_cors import CORS
from routes import register_routes
from utils.logging_config import configure_logging
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)

SWAGGER_TEMPLATE = {
    "info": {
        "title": "Hello Service",
        "description": "Greeting endpoint and operational status routes",
        "version": "0.0.1",
    }
}


def register_error_handlers(app):
    """Render framework and unexpected errors as JSON bodies."""

    @app.errorhandler(HTTPException)
    def handle_http_error(exc):
        response = exc.get_response()
        response.data = jsonify(
            {"error": exc.name, "message": exc.description}
        ).get_data()
        response.content_type = "application/json"
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        logger.exception("Unhandled error")
        return jsonify({"error": "Internal Server Error"}), 500


def create_app(env_file=None):
    # Seed the environment from a .env file if present; existing variables win
    env_path = env_file or os.path.join(os.path.dirname(__file__), "..", ".env")
    load_dotenv(env_path, override=False)

    app = Flask(__name__)
    configure_logging(app)
    Swagger(app, template=SWAGGER_TEMPLATE)

    frontend_origin = os.getenv("FRONTEND_URL", "*")
    origins = (
        [o.strip() for o in frontend_origin.split(",")] if frontend_origin else "*"
    )
    CORS(app, resources={r"/*": {"origins": origins}})

    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()

if __name__ == "__main__":
    host = os.getenv("FLASK_HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    app.run(host=host, port=port)
