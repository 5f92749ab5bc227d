from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Backing file
    filename: str

    # Persistence
    save_on_push: bool
    human_readable: bool

    # Addressing
    separator: str

    # Read policy
    throw_on_missing: bool

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must not be empty")
        if "[" in self.separator or "]" in self.separator:
            raise ValueError("separator must not contain brackets")


def get_settings(env_file: str | None = None) -> Settings:
    if env_file is not None:
        load_dotenv(env_file)

    filename = os.getenv("JSONDB_FILENAME", "data/db.json")

    # Eager flush is the durable default; turn off to batch writes behind save().
    save_on_push = _env_bool("JSONDB_SAVE_ON_PUSH", True)
    human_readable = _env_bool("JSONDB_HUMAN_READABLE", False)

    separator = os.getenv("JSONDB_SEPARATOR", "/")

    throw_on_missing = _env_bool("JSONDB_THROW_ON_MISSING", False)

    return Settings(
        filename=filename,
        save_on_push=save_on_push,
        human_readable=human_readable,
        separator=separator,
        throw_on_missing=throw_on_missing,
    )
