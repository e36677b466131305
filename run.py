#!/usr/bin/env python3
"""Run the registry page with Streamlit. Extra arguments are passed to `streamlit run`."""

import subprocess
import sys
from pathlib import Path

app = Path(__file__).parent / "web" / "streamlit" / "app.py"
sys.exit(subprocess.run([sys.executable, "-m", "streamlit", "run", str(app), *sys.argv[1:]]).returncode)
