import os
from dotenv import load_dotenv

load_dotenv()

class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    MONGO_DBNAME = os.getenv("MONGO_DBNAME", "contentstore")
    MONGO_SERVER_SELECTION_TIMEOUT_MS = int(os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000"))
    MONGO_INIT_COLLECTIONS = True

class DevelopmentConfig(BaseConfig):
    DEBUG = True
    MONGO_URI = os.getenv("DEV_MONGO_URI", "mongodb://localhost:27017")

class ProductionConfig(BaseConfig):
    DEBUG = False
    MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")

class TestingConfig(BaseConfig):
    TESTING = True
    MONGO_URI = "mongodb://localhost:27017"
    MONGO_DBNAME = "contentstore_test"

config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
