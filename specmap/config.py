"""Configuration loading for the specification mapper.

Defaults can be kept in a ``.specmap.yml`` file next to the test sources so
that CI jobs only need to pass the test files.  YAML is read with
ruamel.yaml, falling back to PyYAML and finally JSON.  Command-line options
override anything read here.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from .errors import SpecMapIOError
from .extract import DEFAULT_CALL_TOKEN

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".specmap.yml"
DEFAULT_SPEC_MAP_OUTPUT = "docs/specifications-map.md"


@dataclass
class SpecMapConfig:
    """Settings for one run of the pipeline."""

    test_files: List[str] = field(default_factory=list)
    requirements_file: str = ""
    spec_map_output: str = DEFAULT_SPEC_MAP_OUTPUT
    store: bool = False
    call_token: str = DEFAULT_CALL_TOKEN


def default_config() -> Dict:
    return {
        "requirements_file": "",
        "spec_map_output": DEFAULT_SPEC_MAP_OUTPUT,
        "store": False,
        "call_token": DEFAULT_CALL_TOKEN,
    }


def _merge(data, source: Path) -> Dict:
    merged = default_config()
    if not isinstance(data, dict):
        logger.warning("Ignoring invalid config %s: not a mapping", source)
        return merged
    for key, value in data.items():
        if key not in merged:
            continue
        expected = type(merged[key])
        if not isinstance(value, expected):
            logger.warning(
                "Ignoring invalid config value %s=%r in %s: expected %s",
                key,
                value,
                source,
                expected.__name__,
            )
            continue
        merged[key] = value
    return merged


def load_config(path: str | None = None) -> Dict:
    """Load settings from ``path`` or from ``.specmap.yml``.

    A missing file yields the defaults.  A file that cannot be parsed as YAML
    or JSON also yields the defaults, with a warning.  Values whose type
    differs from the default (an empty ``spec_map_output:``, or
    ``store: "false"``) are skipped with a warning.
    """
    cfg_path = Path(path or DEFAULT_CONFIG_PATH)
    if not cfg_path.exists():
        return default_config()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecMapIOError(str(cfg_path), f"cannot read config file ({exc})") from exc
    if cfg_path.suffix.lower() == ".json":
        try:
            return _merge(json.loads(text), cfg_path)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring invalid config %s: %s", cfg_path, exc)
            return default_config()
    # ruamel.yaml first, then PyYAML, then JSON
    try:
        from ruamel.yaml import YAML  # type: ignore

        y = YAML(typ="safe")
        return _merge(y.load(text) or {}, cfg_path)
    except Exception:
        try:
            import yaml  # type: ignore

            return _merge(yaml.safe_load(text) or {}, cfg_path)
        except Exception:
            try:
                return _merge(json.loads(text), cfg_path)
            except Exception as exc:
                logger.warning("Ignoring invalid config %s: %s", cfg_path, exc)
                return default_config()
