"""Inventory store configuration models."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, model_validator


class StoreConfig(BaseModel):
    """Flat-file store and profile cache settings."""

    data_root: str = "./data"
    cache_expiry_minutes: int = Field(10, ge=0)
    cache_max_entries: int = Field(1000, ge=1)
    pretty_print: bool = False

    @model_validator(mode="after")
    def _normalize_data_root(self) -> "StoreConfig":
        if not self.data_root.strip():
            raise ValueError("data_root must not be empty")
        self.data_root = os.path.normpath(os.path.expanduser(self.data_root))
        return self

    @property
    def cache_expiry_seconds(self) -> int:
        return self.cache_expiry_minutes * 60
