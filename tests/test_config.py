# File: tests/test_config.py

from swatches.core.config import Settings


def test_postgres_url_gets_psycopg_driver():
    s = Settings(database_url="postgres://user:pw@host:5432/swatches")
    assert s.database_url == "postgresql+psycopg://user:pw@host:5432/swatches"

    s = Settings(database_url="postgresql://host/swatches")
    assert s.database_url == "postgresql+psycopg://host/swatches"


def test_other_urls_untouched():
    s = Settings(database_url="sqlite:///./swatches.db")
    assert s.database_url == "sqlite:///./swatches.db"


def test_cors_origins_from_comma_string():
    s = Settings(backend_cors_origins="http://localhost:5173, http://127.0.0.1:5173")
    assert [str(o).rstrip("/") for o in s.backend_cors_origins] == [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]
