from __future__ import annotations

import argparse
import os

import uvicorn


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(prog="yardsale", description="Serve the yard sale catalog API and UI")
    ap.add_argument("--host", default=None, help="Bind address (default: API_HOST or 127.0.0.1)")
    ap.add_argument("--port", type=int, default=None, help="Port (default: API_PORT or 5000)")
    ap.add_argument("--items-dir", default=None, help="Folder holding one sub-folder per item")
    ap.add_argument("--reload", action="store_true", help="Restart on code changes")
    args = ap.parse_args(argv)

    # config reads the environment at import time
    if args.items_dir:
        os.environ["ITEMS_DIR"] = os.path.abspath(args.items_dir)
    from .core import config

    uvicorn.run(
        "yardsale.main:create_app",
        factory=True,
        host=args.host or config.API_HOST,
        port=args.port or config.API_PORT,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
