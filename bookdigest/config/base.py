"""Base configuration model and TOML loader."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ConfigDict

ConfigT = TypeVar("ConfigT", bound="BaseConfig")


class BaseConfig(BaseModel):
    """Strict, immutable base for every configuration block."""

    model_config = ConfigDict(extra="forbid", frozen=True)


def load_config(model_cls: type[ConfigT], path: Path) -> ConfigT:
    """Read a TOML file and validate it against ``model_cls``.

    Raises :class:`FileNotFoundError` when the file does not exist,
    :class:`ValueError` when the TOML cannot be decoded and
    :class:`pydantic.ValidationError` when the content does not match the model.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    try:
        with path.open("rb") as handle:
            payload = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    return model_cls.model_validate(payload)


__all__ = ["BaseConfig", "load_config"]
