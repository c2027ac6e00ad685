from typing import Optional

from flask import Flask
from pymongo import MongoClient

from .config import config_by_name
from .extensions import mongo
from .api.v1 import v1_bp
from .errors import register_error_handlers
from .cli import register_commands


def create_app(config_name: str = "development", mongo_client: Optional[MongoClient] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    mongo.init_app(app, client=mongo_client)

    # -------------------------------------------------
    # Collections & indexes (must exist before any request)
    # -------------------------------------------------
    if app.config["MONGO_INIT_COLLECTIONS"]:
        mongo.init_collections(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_commands(app)

    return app
