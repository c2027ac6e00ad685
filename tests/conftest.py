import mongomock
import pytest

from contentstore import create_app


@pytest.fixture
def mongo_client():
    return mongomock.MongoClient()


@pytest.fixture
def db(mongo_client):
    return mongo_client["contentstore_test"]


@pytest.fixture
def app(mongo_client):
    return create_app("testing", mongo_client=mongo_client)


@pytest.fixture
def client(app):
    return app.test_client()
