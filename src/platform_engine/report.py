"""Report — assemble the platform report and render it.

Responsibilities:
    1. Load the alias tables once and resolve both identifiers.
    2. Render the fixed two-line text printed by the CLI.
    3. Render a small table for the Streamlit viewer.

The text format is stable and bit-exact::

    OS: <os>
    Arch: <arch>
"""

from __future__ import annotations

import pandas as pd

from src.config import load_aliases
from . import identifiers

# (label, report key, raw key) in print order
_FIELDS: list[tuple[str, str, str]] = [
    ("OS", "os", "raw_os"),
    ("Arch", "arch", "raw_arch"),
]


def collect_report(
    aliases: dict[str, dict[str, str]] | None = None,
) -> dict[str, str]:
    """Query the host and build the report.

    Args:
        aliases: Alias tables as returned by :func:`src.config.load_aliases`.
            Loaded from the bundled table when ``None``.

    Returns:
        dict with keys ``os``, ``arch`` (normalised tokens) and
        ``raw_os``, ``raw_arch`` (values as Python reported them).
    """
    if aliases is None:
        aliases = load_aliases()

    return {
        "os": identifiers.os_identifier(aliases),
        "arch": identifiers.arch_identifier(aliases),
        "raw_os": identifiers.raw_os(),
        "raw_arch": identifiers.raw_arch(),
    }


def format_report(report: dict[str, str]) -> str:
    """Render the report as the two ``Label: value`` lines.

    Raises:
        KeyError: If ``os`` or ``arch`` is missing.
        ValueError: If either value is empty.
    """
    lines: list[str] = []
    for label, key, _ in _FIELDS:
        value = report[key]
        if not value:
            raise ValueError(f"Report field '{key}' is empty")
        lines.append(f"{label}: {value}\n")
    return "".join(lines)


def report_frame(report: dict[str, str]) -> pd.DataFrame:
    """Return the report as a two-row table (``Field``, ``Value``, ``Raw``)."""
    rows = [
        {"Field": label, "Value": report[key], "Raw": report.get(raw_key, "")}
        for label, key, raw_key in _FIELDS
    ]
    return pd.DataFrame(rows, columns=["Field", "Value", "Raw"])
