"""
Configuration loader — reads seamgen.yml into a GeneratorContext.

The config file is optional. When present it is found by walking up
from the working directory, validated against a Pydantic schema, and
turned into the explicit context the generator runs with.

Environment overrides (applied after the file):
    SEAMGEN_TEMPLATES_DIR, SEAMGEN_CONTRACTS_DIR
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError

from seamgen.core.context import DEFAULT_TEMPLATES_DIR, GENERATOR_VERSION, GeneratorContext

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "seamgen.yml"


class ConfigError(Exception):
    """Raised when generator configuration is invalid or unreadable."""


class GeneratorConfig(BaseModel):
    """Schema of seamgen.yml. Every key is optional."""

    templates_dir: str | None = None
    contracts_dir: str = "contracts"
    stub_dir: str = "src/generated"
    blueprint_dir: str = "blueprints"
    test_dir: str = "tests"
    generator_version: str = GENERATOR_VERSION
    missing_placeholder: Literal["empty", "keep"] = "empty"


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for seamgen.yml starting from the given directory, walking up.

    Returns:
        Path to seamgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path) -> GeneratorConfig:
    """Load and validate a seamgen.yml file.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading generator config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "seamgen" key or be flat
    data = data.get("seamgen", data) or {}

    try:
        return GeneratorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid generator configuration: {e}") from e


def load_context(
    config_path: Path | None = None,
    start_dir: Path | None = None,
) -> GeneratorContext:
    """Build the generator context from config file and environment.

    Args:
        config_path: Explicit seamgen.yml. If None, searches upward from
            ``start_dir`` (default: cwd); a missing file means defaults.
        start_dir: Where the upward search starts and, without a config
            file, the project root.

    Raises:
        ConfigError: If an explicit or discovered config file is invalid.
    """
    if config_path is None:
        config_path = find_config_file(start_dir)

    if config_path is not None:
        config = load_config(config_path)
        root = config_path.parent.resolve()
    else:
        config = GeneratorConfig()
        root = (start_dir or Path.cwd()).resolve()

    templates_dir = _resolve_dir(
        root, os.environ.get("SEAMGEN_TEMPLATES_DIR") or config.templates_dir
    ) or DEFAULT_TEMPLATES_DIR
    contracts_dir = _resolve_dir(
        root, os.environ.get("SEAMGEN_CONTRACTS_DIR") or config.contracts_dir
    )

    context = GeneratorContext(
        root=root,
        templates_dir=templates_dir,
        contracts_dir=contracts_dir,
        stub_dir=config.stub_dir,
        blueprint_dir=config.blueprint_dir,
        test_dir=config.test_dir,
        generator_version=config.generator_version,
        missing_placeholder=config.missing_placeholder,
    )
    logger.info("Generator context: root=%s templates=%s", root, templates_dir)
    return context


def _resolve_dir(root: Path, value: str | None) -> Path | None:
    """Resolve a configured directory against the project root."""
    if not value:
        return None
    path = Path(value).expanduser()
    return path if path.is_absolute() else (root / path).resolve()
