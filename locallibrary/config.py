import os

class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "locallibrary-dev-secret")

    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        "sqlite:///locallibrary.db"
    )

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # update form: instance + book list are read in parallel
    CATALOG_FETCH_WORKERS = int(os.getenv("CATALOG_FETCH_WORKERS", "2"))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = os.getenv("TEST_DATABASE_URI", "sqlite:///locallibrary-test.db")
    LOG_LEVEL = "DEBUG"
