"""Identifiers — read the host platform and normalise it to short tokens.

Python spells the host differently from the tokens the report prints:

    sys.platform        "win32"   → "windows"
    platform.machine()  "x86_64"  → "amd64"

The mapping lives in ``platform_aliases.yaml`` next to this module, which
only applies it. Values the table does not know are passed through lower-cased,
so the lookup never fails.
"""

from __future__ import annotations

import platform
import re
import sys

from src.config import load_aliases
from src.logger_config import get_logger

logger = get_logger(__name__)

UNKNOWN: str = "unknown"

# "freebsd14" → "freebsd", "sunos5" → "sunos"
_VERSION_SUFFIX = re.compile(r"\d+$")


def raw_os() -> str:
    """Return the interpreter's platform string (``sys.platform``)."""
    return sys.platform


def raw_arch() -> str:
    """Return the machine type reported by the OS (``platform.machine()``)."""
    return platform.machine()


def normalize_os(raw: str, table: dict[str, str]) -> str:
    """Map a ``sys.platform`` value to an OS token.

    The longest key of *table* that prefixes the lower-cased *raw* value
    wins, so ``win`` matches ``win32`` and ``linux`` matches ``linux2``.

    Args:
        raw: Value as reported by Python.
        table: The ``os`` section of the alias config.

    Returns:
        The mapped token; otherwise *raw* lower-cased with any trailing
        version number removed; ``"unknown"`` if *raw* is empty.
    """
    value = raw.strip().lower()
    if not value:
        logger.debug("Empty OS identifier, reporting %r", UNKNOWN)
        return UNKNOWN

    matches = [key for key in table if value.startswith(key)]
    if matches:
        token = table[max(matches, key=len)]
        logger.debug("OS %r → %r", raw, token)
        return token

    token = _VERSION_SUFFIX.sub("", value) or value
    logger.debug("No OS alias for %r, reporting %r", raw, token)
    return token


def normalize_arch(raw: str, table: dict[str, str]) -> str:
    """Map a ``platform.machine()`` value to an architecture token.

    Args:
        raw: Value as reported by the OS (``x86_64``, ``AMD64``, ``aarch64`` ...).
        table: The ``arch`` section of the alias config.

    Returns:
        The mapped token; otherwise *raw* lower-cased; ``"unknown"`` if
        *raw* is empty.
    """
    value = raw.strip().lower()
    if not value:
        logger.debug("Empty architecture identifier, reporting %r", UNKNOWN)
        return UNKNOWN

    token = table.get(value)
    if token is None:
        logger.debug("No architecture alias for %r, reporting %r", raw, value)
        return value

    logger.debug("Arch %r → %r", raw, token)
    return token


def os_identifier(aliases: dict[str, dict[str, str]] | None = None) -> str:
    """Return the OS token for the running host."""
    if aliases is None:
        aliases = load_aliases()
    return normalize_os(raw_os(), aliases["os"])


def arch_identifier(aliases: dict[str, dict[str, str]] | None = None) -> str:
    """Return the architecture token for the running host."""
    if aliases is None:
        aliases = load_aliases()
    return normalize_arch(raw_arch(), aliases["arch"])
