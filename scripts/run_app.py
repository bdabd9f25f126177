#!/usr/bin/env python
"""
Run the Streamlit price preview application.

Usage:
    python scripts/run_app.py [--port 8501] [extra streamlit options]

UI_PORT in the environment (or .env) sets the default port.
"""
import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv


def main():
    project_root = Path(__file__).parent.parent
    ui_path = project_root / 'src' / 'custom_pricing' / 'ui' / 'app_streamlit.py'

    if not ui_path.exists():
        print(f"ERROR: UI module not found at {ui_path}")
        sys.exit(1)

    # Shop/variant settings shown on the System tab come from .env too
    load_dotenv(project_root / '.env', override=False)

    parser = argparse.ArgumentParser(description="Custom length pricing preview UI")
    parser.add_argument('--port', default=os.environ.get('UI_PORT', '8501'))
    args, streamlit_args = parser.parse_known_args()

    env = os.environ.copy()
    src_path = str(project_root / 'src')
    env['PYTHONPATH'] = os.pathsep.join(p for p in (src_path, env.get('PYTHONPATH')) if p)

    cmd = [
        sys.executable, '-m', 'streamlit', 'run', str(ui_path),
        '--server.port', str(args.port),
        *streamlit_args,
    ]
    print(f"Starting price preview UI on :{args.port}")

    try:
        subprocess.run(cmd, cwd=str(project_root), env=env)
    except KeyboardInterrupt:
        print("\nPreview UI stopped.")


if __name__ == "__main__":
    main()
