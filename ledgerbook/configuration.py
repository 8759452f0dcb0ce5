"""Mini README: Centralised configuration models and helpers for Ledgerbook.

Structure:
    * LedgerbookSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to locate the ledger storage file, choose the id
    strategy and read the web service bind address. Values come from
    ``LEDGERBOOK_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerbookSettings(BaseSettings):
    """Runtime configuration for the ledger store and its front ends."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the ledger storage file and CSV exports.",
    )
    storage_filename: str = Field(
        "ledger.json",
        description="Name of the key-value storage file inside the data directory.",
    )
    storage_key: str = Field(
        "transactions",
        description="Key under which the serialised transaction list is stored.",
    )
    id_strategy: Literal["sequential", "timestamp"] = Field(
        "sequential",
        description="How new transaction identifiers are generated.",
    )
    currency: str = Field(
        "USD",
        description="ISO currency code used when displaying amounts.",
        min_length=3,
        max_length=3,
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "LEDGERBOOK_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @validator("currency")
    def _normalise_currency(cls, value: str) -> str:
        return value.upper()

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON key-value storage file."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> LedgerbookSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerbookSettings()
