import os
from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def to_async_url(url: str) -> str:
    """Fill in an async driver for bare postgres/sqlite URLs."""
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url


class Settings:
    def __init__(self):
        self.storage_backend: str = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
        self.database_url: str = os.getenv(
            "DATABASE_URL",
            "sqlite+aiosqlite:///./inventory.db"
        )
        self.database_echo: bool = _as_bool(os.getenv("DATABASE_ECHO", "False"))

        # The in-memory store is useless empty, the database keeps what it has.
        default_seed = "True" if self.storage_backend == "memory" else "False"
        self.seed_sample_data: bool = _as_bool(os.getenv("SEED_SAMPLE_DATA", default_seed))

        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        self.cors_origins: list[str] = [
            o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()
        ]

    @property
    def async_database_url(self) -> str:
        return to_async_url(self.database_url)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()


settings = Settings()
