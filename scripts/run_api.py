#!/usr/bin/env python
"""
Run the custom price API (FastAPI + uvicorn).

Usage:
    python scripts/run_api.py [--reload]
"""
import subprocess
import sys
import os
from pathlib import Path


def main():
    project_root = Path(__file__).parent.parent
    os.chdir(project_root)

    # Ensure src is in python path
    env = os.environ.copy()
    src_path = str(project_root / "src")
    if "PYTHONPATH" in env:
        env["PYTHONPATH"] = f"{src_path}{os.pathsep}{env['PYTHONPATH']}"
    else:
        env["PYTHONPATH"] = src_path

    port = env.get("PORT", "3000")
    cmd = [
        sys.executable, "-m", "uvicorn",
        "--factory", "custom_pricing.api.main:create_app",
        "--host", env.get("HOST", "0.0.0.0"),
        "--port", port,
    ]
    if "--reload" in sys.argv[1:]:
        cmd.append("--reload")

    print(f"Starting Custom Price API on :{port}...")
    try:
        subprocess.run(cmd, env=env)
    except KeyboardInterrupt:
        print("\nAPI stopped.")


if __name__ == "__main__":
    main()
