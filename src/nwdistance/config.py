from __future__ import annotations

"""Option schemas and loaders for the batch helpers."""

import logging
from pathlib import Path
from typing import Any, Literal, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class PairwiseOptions(BaseModel):
    """Knobs for :mod:`nwdistance.pairwise`.

    The distance itself is not configurable; these only shape how batches
    of distances are reported. ``log_level`` is the level batch summaries
    are emitted at; the logger's own threshold is left to the application.
    """

    normalize: bool = False
    top_k: int = Field(default=1, ge=1)
    log_level: LogLevel = "DEBUG"


DEFAULT_OPTIONS = PairwiseOptions()


class OptionsNotFoundError(FileNotFoundError):
    """Raised when an options file cannot be located."""


def options_from_mapping(data: Mapping[str, Any] | None) -> PairwiseOptions:
    """Validate a plain mapping into :class:`PairwiseOptions`."""

    try:
        return PairwiseOptions.model_validate(dict(data or {}))
    except ValidationError as exc:
        raise ValueError(f"Invalid pairwise options: {exc}") from exc


def load_options(path: Path) -> PairwiseOptions:
    """Load options from a YAML file; an empty file yields the defaults."""

    if not path.exists():
        raise OptionsNotFoundError(f"Options file not found at {path}")
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is not None and not isinstance(data, Mapping):
        raise ValueError(f"Options in {path} must be a mapping, got {type(data).__name__}")
    return options_from_mapping(data)
