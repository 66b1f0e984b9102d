# topmark:header:start
#
#   project      : TrapWarnings
#   file         : io.py
#   file_relpath : src/trapwarnings/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render TOML configuration sources.

This module provides I/O helpers for reading TrapWarnings configuration from
on-disk TOML files (``trapwarnings.toml`` / ``[tool.trapwarnings]`` in
``pyproject.toml``) and for rendering a configuration table back to TOML text.

Parsing and rendering are done with `tomlkit`; parsed documents are returned as
plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from trapwarnings.config.logging import get_logger
from trapwarnings.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION

if TYPE_CHECKING:
    from trapwarnings.config.logging import TrapLogger

TomlTable = dict[str, Any]

logger: TrapLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``trapwarnings.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(pyproject: TomlTable) -> TomlTable | None:
    """Return the ``[tool.trapwarnings]`` table of a parsed ``pyproject.toml``.

    Args:
        pyproject (TomlTable): Parsed ``pyproject.toml`` document.

    Returns:
        TomlTable | None: The table, or None when the project does not configure TrapWarnings.
    """
    tool: Any = pyproject.get("tool")
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get("trapwarnings")
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config(start: Path | None = None) -> tuple[Path, TomlTable] | None:
    """Find the nearest configuration source, walking up from ``start``.

    In each directory ``trapwarnings.toml`` takes precedence over a
    ``pyproject.toml`` carrying a ``[tool.trapwarnings]`` table. A
    ``pyproject.toml`` without that table is skipped and the search continues.

    Args:
        start (Path | None): Directory to start from (defaults to the current working directory).

    Returns:
        tuple[Path, TomlTable] | None: The config file path and its TrapWarnings table,
            or None when no source was found.
    """
    base: Path = (start or Path.cwd()).resolve()
    for directory in (base, *base.parents):
        standalone: Path = directory / CONFIG_FILE_NAME
        if standalone.is_file():
            logger.debug("Using config file %s", standalone)
            return standalone, load_toml_dict(standalone)

        pyproject: Path = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            table: TomlTable | None = extract_tool_table(load_toml_dict(pyproject))
            if table is not None:
                logger.debug("Using [%s] from %s", PYPROJECT_SECTION, pyproject)
                return pyproject, table
            logger.trace("No [%s] table in %s", PYPROJECT_SECTION, pyproject)

    logger.debug("No TrapWarnings configuration found above %s", base)
    return None


def to_toml(table: TomlTable, *, for_pyproject: bool = False) -> str:
    """Serialize a configuration table to TOML text.

    Args:
        table (TomlTable): Flat mapping of configuration keys to values.
        for_pyproject (bool): If True, nest the output under ``[tool.trapwarnings]``.

    Returns:
        str: The rendered TOML document.
    """
    cleaned: TomlTable = {k: v for k, v in table.items() if v is not None}
    if not for_pyproject:
        return tomlkit.dumps(cleaned)

    doc: tomlkit.TOMLDocument = tomlkit.document()
    tool = tomlkit.table(is_super_table=True)
    section = tomlkit.table()
    for key, value in cleaned.items():
        section.add(key, value)
    tool.add("trapwarnings", section)
    doc.add("tool", tool)
    return tomlkit.dumps(doc)
