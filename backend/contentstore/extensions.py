from typing import Optional

from flask import Flask, current_app
from pymongo import MongoClient
from pymongo.database import Database

from contentstore.db.collections import Collections
from contentstore.db.provisioning import init_collections


class MongoState:
    def __init__(self, client: MongoClient, db: Database):
        self.client = client
        self.db = db
        self.collections: Optional[Collections] = None


class Mongo:
    """
    Flask extension owning the MongoDB connection and the provisioned
    collection handles of each app.
    """

    def init_app(self, app: Flask, client: Optional[MongoClient] = None) -> None:
        if client is None:
            client = MongoClient(
                app.config["MONGO_URI"],
                serverSelectionTimeoutMS=app.config["MONGO_SERVER_SELECTION_TIMEOUT_MS"],
            )
        db = client[app.config["MONGO_DBNAME"]]
        app.extensions["mongo"] = MongoState(client, db)

    def _state(self, app: Optional[Flask] = None) -> MongoState:
        app = app or current_app
        return app.extensions["mongo"]

    def init_collections(self, app: Optional[Flask] = None) -> Collections:
        app = app or current_app._get_current_object()
        state = self._state(app)

        try:
            collections = init_collections(state.db, logger=app.logger)
        except Exception:
            app.logger.exception("Collection provisioning failed on %s", state.db.name)
            raise

        state.collections = collections
        app.logger.info("All collections provisioned on %s", state.db.name)
        return collections

    @property
    def db(self) -> Database:
        return self._state().db

    @property
    def collections(self) -> Collections:
        collections = self._state().collections
        if collections is None:
            raise RuntimeError("Collections have not been provisioned; call init_collections first")
        return collections


mongo = Mongo()
