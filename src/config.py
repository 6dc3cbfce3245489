"""Configuration management for the Color API.

This module provides the configuration system for the service using Pydantic
models. All settings are loaded from environment variables; in Kubernetes they
are injected from the `mongo-secret` Secret and the `mongo-config` ConfigMap.

## Configuration Sources

Configuration is read from environment variables at process startup. The
`get_settings()` function uses `@lru_cache` to ensure settings are loaded once
per process (containers have static env vars, so this is safe).

## Environment Variables

**MongoDB**
- `DB_URL`: Full MongoDB connection string. When set, it is used verbatim and
  the individual `DB_*` connection variables below are not required.
- `DB_USER`: Database user (required unless `DB_URL` is set)
- `DB_PASSWORD`: Database password (required unless `DB_URL` is set)
- `DB_HOST`: Database host, e.g. `mongo-0.mongo` (required unless `DB_URL`
  is set)
- `DB_PORT`: Database port (default: `27017`)
- `DB_NAME`: Database holding the colors collection (default: `colordb`)
- `DB_AUTH_SOURCE`: Authentication database (default: `admin`)
- `DB_COLLECTION`: Collection name (default: `colors`)
- `DB_SERVER_SELECTION_TIMEOUT_MS`: Server selection timeout in milliseconds
  (default: `5000`)
- `DB_CIRCUIT_BREAKER_THRESHOLD`: Failures before circuit opens (default: `5`)
- `DB_CIRCUIT_BREAKER_TIMEOUT`: Circuit recovery timeout in seconds
  (default: `30`)

**HTTP listener**
- `API_HOST`: Bind address (default: `0.0.0.0`)
- `API_PORT`: Bind port (default: `80`)
- `LOG_LEVEL`: Application log level (default: `INFO`)

## Usage

```python
from config import get_settings
from clients import create_document_store

settings = get_settings()
store = create_document_store(settings.mongo)
```

Missing required variables raise `ValueError`; the process entrypoint turns
that into a non-zero exit before the HTTP listener is bound.
"""

import os
from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import BaseModel, Field
from pydantic_settings import SettingsConfigDict

_REQUIRED_DB_VARS = ("DB_USER", "DB_PASSWORD", "DB_HOST")


class MongoConfig(BaseModel):
    """Configuration for the MongoDB document store.

    Attributes:
        url: MongoDB connection string (credentials included).
        database: Database name holding the colors collection.
            Default: "colordb".
        collection: Collection name. Default: "colors".
        server_selection_timeout_ms: How long the driver waits to find a
            usable server before failing an operation. Default: 5000.
        circuit_breaker_threshold: Failures before circuit breaker opens.
            Default: 5.
        circuit_breaker_timeout: Seconds before circuit breaker recovery.
            Default: 30.
    """

    url: str = Field(repr=False)
    database: str = "colordb"
    collection: str = "colors"
    server_selection_timeout_ms: int = 5000
    circuit_breaker_threshold: int = 5
    circuit_breaker_timeout: int = 30

    model_config = SettingsConfigDict(frozen=True)

    @staticmethod
    def build_url(
        *,
        user: str,
        password: str,
        host: str,
        port: int,
        database: str,
        auth_source: str = "admin",
    ) -> str:
        """Assemble a MongoDB connection string.

        User and password are percent-encoded so that secrets containing
        `@`, `:` or `/` do not break the URI.

        Returns:
            A `mongodb://` connection string.
        """
        return (
            f"mongodb://{quote_plus(user)}:{quote_plus(password)}@{host}:{port}/"
            f"{database}?authSource={quote_plus(auth_source)}"
        )

    @classmethod
    def from_env(cls) -> "MongoConfig":
        """Create MongoConfig from environment variables.

        Returns:
            Configured MongoConfig instance.

        Raises:
            ValueError: If `DB_URL` is not set and any of `DB_USER`,
                `DB_PASSWORD`, `DB_HOST` is missing, or a numeric variable
                cannot be parsed.
        """
        database = os.getenv("DB_NAME") or "colordb"

        url = os.getenv("DB_URL")
        if not url:
            missing = [name for name in _REQUIRED_DB_VARS if not os.getenv(name)]
            if missing:
                msg = f"Missing required database configuration: {', '.join(missing)} (or set DB_URL)"
                raise ValueError(msg)

            url = cls.build_url(
                user=os.environ["DB_USER"],
                password=os.environ["DB_PASSWORD"],
                host=os.environ["DB_HOST"],
                port=int(os.getenv("DB_PORT") or "27017"),
                database=database,
                auth_source=os.getenv("DB_AUTH_SOURCE") or "admin",
            )

        return cls(
            url=url,
            database=database,
            collection=os.getenv("DB_COLLECTION") or "colors",
            server_selection_timeout_ms=int(os.getenv("DB_SERVER_SELECTION_TIMEOUT_MS") or "5000"),
            circuit_breaker_threshold=int(os.getenv("DB_CIRCUIT_BREAKER_THRESHOLD") or "5"),
            circuit_breaker_timeout=int(os.getenv("DB_CIRCUIT_BREAKER_TIMEOUT") or "30"),
        )


class APIConfig(BaseModel):
    """Configuration for the HTTP listener.

    Attributes:
        host: Bind address. Default: "0.0.0.0".
        port: Bind port. Default: 80 (the in-container port).
        log_level: Application log level. Default: "INFO".
    """

    host: str = "0.0.0.0"  # noqa: S104
    port: int = 80
    log_level: str = "INFO"

    model_config = SettingsConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Create APIConfig from environment variables."""
        return cls(
            host=os.getenv("API_HOST") or "0.0.0.0",  # noqa: S104
            port=int(os.getenv("API_PORT") or "80"),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )


class Settings(BaseModel):
    """Immutable runtime configuration for the Color API.

    Attributes:
        mongo: MongoDB connection and collection configuration.
        api: HTTP listener configuration.
    """

    mongo: MongoConfig
    api: APIConfig

    model_config = SettingsConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""
        return cls(mongo=MongoConfig.from_env(), api=APIConfig.from_env())


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Load and return application settings (cached per process).

    Returns:
        A frozen `Settings` instance with all configuration values.

    Raises:
        ValueError: If required configuration is missing.
    """
    return Settings.from_env()
