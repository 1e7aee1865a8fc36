"""Platform Report — CLI entry point.

Prints the host operating system and architecture as two lines::

    OS: linux
    Arch: amd64

Command-line arguments are not read. The Streamlit viewer lives in
``app/streamlit_app.py``.
"""

import sys

from src.platform_engine.report import collect_report, format_report


def main() -> None:
    """Collect the platform report and write it to stdout."""
    sys.stdout.write(format_report(collect_report()))
    sys.stdout.flush()


if __name__ == "__main__":
    main()
