from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import find_dotenv, load_dotenv

from versort.schemas import SortConfig

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}

# YAML key -> SortConfig field.
_FILE_KEYS = {
    "ignore": "ignore_unparsable",
    "count_is_char": "counter",
}

# Environment variable -> SortConfig field.
_ENV_KEYS = {
    "VERSORT_IGNORE": "ignore_unparsable",
    "VERSORT_COUNT_IS_CHAR": "counter",
}


def repo_root() -> Path:
    # Project root is the directory that contains the `versort/` package.
    return Path(__file__).resolve().parents[1]


def load_env() -> None:
    # Prefer a project-local `.env`; fall back to searching from CWD.
    root_env = repo_root() / ".env"
    env_path = str(root_env) if root_env.exists() else (find_dotenv(usecwd=True) or str(root_env))
    load_dotenv(env_path)


def _env_flag(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got {raw!r}")


def load_config_file(path: Path) -> dict[str, bool]:
    try:
        data: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"invalid YAML in config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"config file must be a YAML mapping: {path}")

    values: dict[str, bool] = {}
    for key, raw in data.items():
        field = _FILE_KEYS.get(str(key))
        if field is None:
            raise ValueError(f"unknown config key {key!r} in {path}")
        if not isinstance(raw, bool):
            raise ValueError(f"config key {key!r} must be true or false")
        values[field] = raw
    return values


def load_config(
    *,
    ignore: bool = False,
    counter: bool = False,
    config_path: Path | None = None,
) -> SortConfig:
    """Build a SortConfig from defaults, a YAML file, the environment and flags.

    Later layers win. Flags can only switch options on.
    """
    load_env()
    values: dict[str, bool] = {}

    if config_path is None and os.getenv("VERSORT_CONFIG"):
        config_path = Path(os.environ["VERSORT_CONFIG"])
    if config_path is not None:
        values.update(load_config_file(config_path))
        logger.debug("loaded config file %s: %s", config_path, values)

    for env_var, field in _ENV_KEYS.items():
        flag = _env_flag(env_var)
        if flag is not None:
            values[field] = flag

    if ignore:
        values["ignore_unparsable"] = True
    if counter:
        values["counter"] = True

    config = SortConfig.model_validate(values)
    logger.debug("effective config: %s", config)
    return config
