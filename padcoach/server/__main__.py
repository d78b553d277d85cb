# padcoach/server/__main__.py
"""Entry point: python -m padcoach.server"""

from __future__ import annotations

import argparse
from pathlib import Path

import uvicorn

from .config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="padcoach command server")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=settings.DATA_DIR,
        help="Directory for history, heatmaps and drills",
    )
    args = parser.parse_args()

    from . import create_app

    app = create_app(data_dir=args.data_dir)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
