"""
Launcher for the SmartGate dashboard

    smartgate-dashboard [streamlit options]
"""

import subprocess
import sys
from pathlib import Path


def launch_streamlit(extra_args=None):
    """Run the Streamlit app and return its exit code"""
    app = Path(__file__).parent / "main.py"
    cmd = [sys.executable, "-m", "streamlit", "run", str(app), *(extra_args or [])]
    try:
        return subprocess.run(cmd).returncode
    except KeyboardInterrupt:
        print("\n👋 Dashboard stopped by user")
        return 0


def main():
    sys.exit(launch_streamlit(sys.argv[1:]))


if __name__ == "__main__":
    main()
