"""Console entry point: `solar-ppa` starts the dashboard."""

from __future__ import annotations

import sys
from pathlib import Path

from streamlit.web import cli as stcli


def main() -> int:
    script = Path(__file__).resolve().parent / "streamlit_app.py"
    sys.argv = ["streamlit", "run", str(script)]
    return stcli.main()


if __name__ == "__main__":
    sys.exit(main())
