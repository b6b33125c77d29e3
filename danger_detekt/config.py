"""Configuration loading and validation for the command-line host.

Usage:
    config = load("detekt-config.yaml")        # raises ConfigError on bad config
    config.reports                             # absolute report paths
    generate_template("detekt-config.yaml")    # writes example file to disk
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

FORMATS = ("json", "github")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Raised when the configuration is missing or invalid."""


# ---------------------------------------------------------------------------
# Config dataclass
# ---------------------------------------------------------------------------

@dataclass
class Config:
    reports: list[str] = field(default_factory=list)
    base_dir: str | None = None
    format: str = "json"


# ---------------------------------------------------------------------------
# Loader
# ---------------------------------------------------------------------------

def load(config_path: str = "detekt-config.yaml") -> Config:
    """Load and validate configuration from a YAML file.

    Environment variables DETEKT_BASE_DIR and DETEKT_FORMAT override file
    values. Relative report paths and a relative base_dir are resolved
    against the directory that holds the config file; a relative
    DETEKT_BASE_DIR is resolved against the current directory.

    Raises:
        ConfigError: if the file is missing, malformed, or required fields
                     are absent.
    """
    path = Path(config_path)

    if not path.exists():
        raise ConfigError(
            f"Config file not found: '{config_path}'\n"
            "Run `danger-detekt init` to generate a template, or pass report paths directly."
        )

    try:
        with path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse '{config_path}': {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"'{config_path}' must be a YAML mapping at the top level.")

    reports = raw.get("reports") or []
    env_base_dir = os.environ.get("DETEKT_BASE_DIR")
    file_base_dir = raw.get("base_dir")
    fmt = os.environ.get("DETEKT_FORMAT") or raw.get("format") or "json"

    _validate(reports, fmt)

    root = path.resolve().parent
    if env_base_dir:
        base_dir = os.path.abspath(env_base_dir.strip())
    elif file_base_dir:
        base_dir = str(root / str(file_base_dir).strip())
    else:
        base_dir = None

    config = Config(
        reports=[str(root / r) for r in reports],
        base_dir=base_dir,
        format=str(fmt).strip(),
    )
    return config


def _validate(reports, fmt) -> None:
    """Raise ConfigError listing every problem found."""
    errors: list[str] = []

    if not isinstance(reports, list) or not all(isinstance(r, str) for r in reports):
        errors.append("  - 'reports' must be a list of file paths")
    elif not reports:
        errors.append(
            "  - 'reports' is empty - add at least one detekt XML report path"
        )
    if str(fmt).strip() not in FORMATS:
        errors.append(
            f"  - 'format' must be one of {', '.join(FORMATS)} (got '{fmt}')"
        )

    if errors:
        raise ConfigError("Invalid configuration:\n" + "\n".join(errors))


# ---------------------------------------------------------------------------
# Template generator (used by `init` command)
# ---------------------------------------------------------------------------

TEMPLATE = """\
# Directory that reported file paths are made relative to, relative to this
# file (omit to use the current directory)
base_dir: "."

# Output format for `danger-detekt annotate`: json or github
format: "json"

reports:
  # detekt XML reports, relative to this file
  - "build/reports/detekt/detekt.xml"
"""


def generate_template(output_path: str = "detekt-config.yaml") -> None:
    """Write a template detekt-config.yaml to *output_path*.

    Raises:
        ConfigError: if the file already exists.
    """
    path = Path(output_path)
    if path.exists():
        raise ConfigError(
            f"'{output_path}' already exists. Remove it first or choose a different path."
        )
    path.write_text(TEMPLATE, encoding="utf-8")
