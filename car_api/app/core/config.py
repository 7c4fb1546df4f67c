"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and
match a local development setup: a MongoDB instance listening on
``127.0.0.1:27017`` and the API served on port 3000.  In a
production deployment override these via environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Values are read when the instance is created, so tests can set
    environment variables and build a fresh ``Settings()``.
    """

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "API de Carros"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    description: str = field(
        default_factory=lambda: _env(
            "PROJECT_DESCRIPTION",
            "Una API para realizar operaciones CRUD en la entidad de carros.",
        )
    )
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))

    # Connection string for the MongoDB server.  The database and
    # collection names default to the ones used by existing clients
    # of the ``carros`` collection.
    mongodb_url: str = field(default_factory=lambda: _env("MONGODB_URL", "mongodb://127.0.0.1:27017"))
    mongodb_database: str = field(default_factory=lambda: _env("MONGODB_DATABASE", "carros"))
    mongodb_collection: str = field(default_factory=lambda: _env("MONGODB_COLLECTION", "carros"))
    mongodb_timeout_ms: int = field(default_factory=lambda: int(_env("MONGODB_TIMEOUT_MS", "5000")))

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))

    docs_url: str = field(default_factory=lambda: _env("DOCS_URL", "/api-docs"))

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def local_server_url(self) -> str:
        return f"http://localhost:{self.port}"


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
