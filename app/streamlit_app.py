"""Platform Report — Streamlit viewer.

Minimal local page:
    1. Detect the host OS and architecture
    2. Show both tokens and the raw values they came from
    3. Show the exact text the CLI prints

Constraints:
    - No plotting libraries
    - Read-only; nothing is written to disk
"""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Ensure the project root is importable
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from src.platform_engine.report import collect_report, format_report, report_frame  # noqa: E402

# ── Page config ───────────────────────────────────────────────
st.set_page_config(
    page_title="Platform Report",
    page_icon="🖥",
    layout="centered",
)

st.title("🖥 Platform Report")
st.markdown("Operating system and processor architecture of this host.")
st.divider()

report = collect_report()

# ── Summary ───────────────────────────────────────────────────
c1, c2 = st.columns(2)
c1.metric("OS", report["os"])
c2.metric("Arch", report["arch"])

# ── Details ───────────────────────────────────────────────────
st.subheader("Details")
st.dataframe(report_frame(report), use_container_width=True, hide_index=True)

# ── CLI output ────────────────────────────────────────────────
st.subheader("CLI output")
st.code(format_report(report), language="text")
