#!/usr/bin/env python
"""
Run the PV calculator API with uvicorn.

Usage:
    python scripts/run_api.py
"""
import os
import subprocess
import sys
from pathlib import Path

src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from pv_calculator.config.settings import get_settings


def main():
    settings = get_settings()

    # Ensure src is in python path of the uvicorn process
    env = os.environ.copy()
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = str(src_path)

    print(f"Starting PV Calculator API on {settings.api_host}:{settings.api_port}...")
    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "pv_calculator.api.main:app",
            "--host", settings.api_host,
            "--port", str(settings.api_port),
            "--log-level", settings.log_level.lower(),
        ], env=env, cwd=str(settings.project_root))
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
