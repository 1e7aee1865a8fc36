"""Alias configuration for Platform Report.

Loads the table that maps the raw values Python reports for the host
(``sys.platform``, ``platform.machine()``) to short platform tokens such as
``linux`` / ``amd64``.

The default table, ``platform_aliases.yaml``, ships inside
``src.platform_engine`` as package data and is read through
``importlib.resources``, so it is found from a checkout and from an
installed wheel alike. It is not a user option.
"""

from __future__ import annotations

from importlib import resources
from pathlib import Path
from typing import Any

import yaml


ALIASES_PACKAGE: str = "src.platform_engine"
ALIASES_RESOURCE: str = "platform_aliases.yaml"

_SECTIONS: tuple[str, ...] = ("os", "arch")


def _read_default_aliases() -> str:
    """Return the text of the bundled alias table."""
    return resources.files(ALIASES_PACKAGE).joinpath(ALIASES_RESOURCE).read_text(
        encoding="utf-8"
    )


def parse_aliases(text: str, name: str = ALIASES_RESOURCE) -> dict[str, dict[str, str]]:
    """Parse and validate an alias YAML document.

    Args:
        text: YAML source.
        name: Label used in error messages.

    Returns:
        dict with keys ``os`` and ``arch``, each a mapping of lower-cased
        raw value → token.

    Raises:
        ValueError: If the document is not a mapping with ``os`` and
            ``arch`` sections of string keys and non-empty string values.
    """
    try:
        raw: Any = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse alias config '{name}': {exc}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Alias config '{name}' must be a mapping")

    aliases: dict[str, dict[str, str]] = {}
    for section in _SECTIONS:
        table = raw.get(section)
        if not isinstance(table, dict):
            raise ValueError(f"Alias config '{name}' is missing the '{section}' mapping")
        aliases[section] = {}
        for key, value in table.items():
            if not isinstance(key, str) or not isinstance(value, str) or not value:
                raise ValueError(
                    f"Alias config '{name}': '{section}' entry "
                    f"{key!r}: {value!r} must map a string to a non-empty string"
                )
            aliases[section][key.lower()] = value

    return aliases


def load_aliases(config_path: str | Path | None = None) -> dict[str, dict[str, str]]:
    """Load the OS and architecture alias tables.

    Args:
        config_path: Path to an alias YAML. Defaults to the table bundled
            with ``src.platform_engine``.

    Returns:
        See :func:`parse_aliases`.

    Raises:
        FileNotFoundError: If *config_path* is given and does not exist.
        ValueError: If the document is malformed.
    """
    if config_path is None:
        return parse_aliases(_read_default_aliases())

    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Alias config not found: {path}")
    return parse_aliases(path.read_text(encoding="utf-8"), path.name)
