#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery and loading.

A configuration file holds two optional tables, ``[markdown]`` for parser
options and ``[docx]`` for renderer options::

    [markdown]
    parse_underline = false

    [docx]
    default_font = "Arial"
    number_ordered_lists = false

TOML, YAML and JSON files are accepted, as is a ``[tool.md2docx]`` table in
``pyproject.toml``.
"""

import json
import logging
import os
import sys
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]
from typing import Any, Dict, Optional

import yaml

from md2docx.constants import CONFIG_ENV_VAR, CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from md2docx.exceptions import ConfigError
from md2docx.options.base import CloneFrozenMixin
from md2docx.options.docx import DocxRendererOptions
from md2docx.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

SECTION_OPTIONS: Dict[str, type[CloneFrozenMixin]] = {
    "markdown": MarkdownParserOptions,
    "docx": DocxRendererOptions,
}


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Return the ``[tool.md2docx]`` table of a pyproject.toml, or an empty dict."""
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION, {})
    if not isinstance(config, dict):
        raise ConfigError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] in {pyproject_path} must be a table, got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Walk from ``start_dir`` (default: cwd) up to the filesystem root looking for a config file.

    In each directory the dedicated ``.md2docx.*`` files are checked first,
    then a ``pyproject.toml`` that has a ``[tool.md2docx]`` table.

    Parameters
    ----------
    start_dir : Path, optional
        Directory to start from

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            candidate = current / filename
            if candidate.is_file():
                return candidate

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (tomllib.TOMLDecodeError, OSError, ConfigError) as e:
                logger.debug("Skipping unreadable %s: %s", pyproject_path, e)

        if current.parent == current:
            return None
        current = current.parent


def discover_config_file() -> Optional[Path]:
    """Find a configuration file in the working directory's ancestry, then in the home directory.

    Returns
    -------
    Path or None
        Path to the discovered file

    """
    found = find_config_in_parents()
    if found:
        return found

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        candidate = home / filename
        if candidate.is_file():
            return candidate
    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load a configuration mapping from a TOML, YAML, JSON or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration mapping

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, malformed, or not a mapping

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
            # An empty YAML file loads as None
            config = {} if config is None else config
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigError(
                f"Unsupported config file format: {ext}. Use .toml, .yaml, .yml or .json",
                config_path=str(config_path),
            )
    except ConfigError:
        raise
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}", str(config_path), e) from e
    except OSError as e:
        raise ConfigError(f"Error reading config file {config_path}: {e}", str(config_path), e) from e

    if not isinstance(config, dict):
        raise ConfigError(
            f"Config file {config_path} must contain a mapping, got {type(config).__name__}",
            config_path=str(config_path),
        )

    logger.debug("Loaded configuration from %s", config_path)
    return config


def load_config_with_priority(explicit_path: Optional[str] = None, env_var_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from the highest-priority source available.

    Priority order:

    1. ``explicit_path`` (the ``--config`` flag)
    2. ``env_var_path``, defaulting to the ``MD2DOCX_CONFIG`` environment variable
    3. An auto-discovered file

    Returns
    -------
    dict
        Configuration mapping; empty when no file is found

    """
    if explicit_path:
        return load_config_file(explicit_path)

    env_var_path = env_var_path if env_var_path is not None else os.environ.get(CONFIG_ENV_VAR)
    if env_var_path:
        return load_config_file(env_var_path)

    discovered = discover_config_file()
    if discovered:
        return load_config_file(discovered)
    return {}


def _build_options(section: str, values: Any, base: CloneFrozenMixin) -> Any:
    if not isinstance(values, dict):
        raise ConfigError(f"[{section}] must be a table, got {type(values).__name__}")

    allowed = set(base.field_names())
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise ConfigError(
            f"Unknown option(s) in [{section}]: {', '.join(unknown)}. Valid options: {', '.join(sorted(allowed))}"
        )

    try:
        return base.create_updated(**values)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in [{section}]: {e}", original_error=e) from e


def options_from_config(
    config: Dict[str, Any],
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: DocxRendererOptions | None = None,
) -> tuple[MarkdownParserOptions, DocxRendererOptions]:
    """Build option objects from a configuration mapping.

    Parameters
    ----------
    config : dict
        Mapping with optional ``markdown`` and ``docx`` tables
    parser_options : MarkdownParserOptions, optional
        Starting values for the parser options
    renderer_options : DocxRendererOptions, optional
        Starting values for the renderer options

    Returns
    -------
    tuple of (MarkdownParserOptions, DocxRendererOptions)
        Options with the configuration applied

    Raises
    ------
    ConfigError
        For unknown tables, unknown keys or invalid values

    """
    unknown_sections = sorted(set(config) - set(SECTION_OPTIONS))
    if unknown_sections:
        raise ConfigError(f"Unknown configuration table(s): {', '.join(unknown_sections)}")

    parser_options = parser_options or MarkdownParserOptions()
    renderer_options = renderer_options or DocxRendererOptions()

    if "markdown" in config:
        parser_options = _build_options("markdown", config["markdown"], parser_options)
    if "docx" in config:
        renderer_options = _build_options("docx", config["docx"], renderer_options)

    return parser_options, renderer_options
