"""Nav Portal dev launcher. Starts the API server in watch mode."""

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
PORT = os.getenv("PORT", "8787")


def main():
    parser = argparse.ArgumentParser(description="Nav Portal dev launcher")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data storage directory (default: ./data)")
    parser.add_argument("--port", default=PORT, help=f"Port to listen on (default: {PORT})")
    args = parser.parse_args()

    # Build env for the server process so the app picks up the same data dir
    env = os.environ.copy()
    if args.data_dir:
        env["DATA_DIR"] = str(args.data_dir.resolve())

    print(f"Starting server on http://localhost:{args.port} ...")
    proc = subprocess.Popen(
        [sys.executable, "-m", "uvicorn", "navportal.app:create_app", "--factory",
         "--reload", "--host", HOST, "--port", str(args.port)],
        cwd=ROOT, env=env,
    )
    try:
        proc.wait()
    except KeyboardInterrupt:
        print("\nShutting down...")
        proc.terminate()
        proc.wait()


if __name__ == "__main__":
    main()
