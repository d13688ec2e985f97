import logging

from flask import Flask
from flask_cors import CORS

from .config.settings import Config


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(config_class=Config, **service_overrides):
    """Application factory pattern"""
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    CORS(app)
    config_class.init_app(app)

    from .services.container import ServiceContainer
    app.extensions["fridgewise"] = ServiceContainer(app.config, **service_overrides)

    # Register blueprints
    from .routes.analysis import analysis_bp
    from .routes.recipes import recipes_bp
    from .routes.speech import speech_bp
    from .routes.health import health_bp
    from .routes.errors import register_error_handlers

    app.register_blueprint(analysis_bp)
    app.register_blueprint(recipes_bp)
    app.register_blueprint(speech_bp)
    app.register_blueprint(health_bp)
    register_error_handlers(app)

    return app
