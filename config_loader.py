# config_loader.py
from __future__ import annotations

from pathlib import Path
from typing import Any

try:
    import yaml  # PyYAML
except ImportError as e:
    raise SystemExit(
        "Missing dependency: PyYAML\n"
        "Install with: python -m pip install pyyaml"
    ) from e


class DescriptionReaderConfig:
    """
    Immutable-ish container for description reader configuration.
    """

    def __init__(
        self,
        *,
        file_patterns: list[str],
        exclude_dirs: set[str],
        encoding: str,
        color_events: bool,
    ):
        self.file_patterns = file_patterns
        self.exclude_dirs = exclude_dirs
        self.encoding = encoding
        self.color_events = color_events


# ---------------- Defaults ---------------------------------------------------

DEFAULT_CONFIG = DescriptionReaderConfig(
    file_patterns=["*.desc", "*.description"],
    exclude_dirs={".git", "__pycache__"},
    encoding="utf-8",
    color_events=True,
)

# ---------------- Loader -----------------------------------------------------


def _as_str_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{name} must be a list of strings")
    return [str(v) for v in value]


def _as_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"{name} must be true or false")
    return value


def load_config(path: Path) -> DescriptionReaderConfig:
    """
    Load YAML config and return a DescriptionReaderConfig instance.

    A missing file yields the defaults.
    """
    if not path.exists():
        return DEFAULT_CONFIG

    raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise TypeError("Config root must be a mapping")

    encoding = raw.get("encoding", DEFAULT_CONFIG.encoding)
    if not isinstance(encoding, str) or not encoding:
        raise TypeError("encoding must be a non-empty string")

    return DescriptionReaderConfig(
        file_patterns=_as_str_list(
            raw.get("file_patterns", list(DEFAULT_CONFIG.file_patterns)),
            "file_patterns",
        ),
        exclude_dirs=set(
            _as_str_list(
                raw.get("exclude_dirs", sorted(DEFAULT_CONFIG.exclude_dirs)),
                "exclude_dirs",
            )
        ),
        encoding=encoding,
        color_events=_as_bool(
            raw.get("color_events", DEFAULT_CONFIG.color_events),
            "color_events",
        ),
    )
