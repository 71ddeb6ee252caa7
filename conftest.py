"""Test environment: point the service at a private in-memory SQLite database
before any application module reads its settings."""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REPOSITORY_BACKEND"] = "sql"
os.environ["DB_CREATE_SCHEMA"] = "true"
os.environ.setdefault("LOG_LEVEL", "WARNING")
