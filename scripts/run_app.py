#!/usr/bin/env python
"""
Run the Streamlit PV calculator.

Usage:
    python scripts/run_app.py
"""
import subprocess
import sys
from pathlib import Path

src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from pv_calculator.config.settings import get_settings


def main():
    settings = get_settings()
    ui_path = src_path / 'pv_calculator' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(ui_path),
        '--server.port', str(settings.ui_port),
    ]
    print(f"Starting Streamlit: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, cwd=str(settings.project_root))
    except KeyboardInterrupt:
        print("\nCalculator stopped.")


if __name__ == "__main__":
    main()
