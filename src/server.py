"""HTTP server runner for the storefront.

Usage:
    python src/server.py                      # 0.0.0.0:5000 (or $HOST/$PORT)
    python src/server.py --port 8000 --reload
"""

import argparse
import os

import uvicorn

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront HTTP server")
    parser.add_argument(
        "--host",
        default=os.getenv("HOST", DEFAULT_HOST),
        help=f"Interface to bind (default: $HOST or {DEFAULT_HOST})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", DEFAULT_PORT)),
        help=f"Port to listen on (default: $PORT or {DEFAULT_PORT})",
    )
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    uvicorn.run("app:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
