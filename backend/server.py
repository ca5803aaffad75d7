#!/usr/bin/env python3
"""
Run the GitHub Browser relay under uvicorn.

The browser frontend expects the relay on port 5000; the health check at
/api/health answers without contacting GitHub, so it is a quick way to see
whether the server came up.

    python backend/server.py                    # 127.0.0.1:5000, reloads on edits
    python backend/server.py --port 8080 --no-reload
    uvicorn backend.app:create_app --factory    # same app, plain uvicorn
"""

import argparse


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Relay read-only GitHub API queries for the browser frontend",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
The relay reads GITHUB_TOKEN, GITHUB_API_BASE, CORS_ORIGINS and LOG_LEVEL
from the environment or from .env. Without a token GitHub allows 60
requests per hour.

  python backend/server.py --host 0.0.0.0 --no-reload
        """
    )

    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Interface to listen on (default: 127.0.0.1)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=5000,
        help="Port the frontend calls (default: 5000)"
    )
    parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Do not restart the server when source files change"
    )
    return parser


def run(host: str = "127.0.0.1", port: int = 5000, reload: bool = True):
    """Start uvicorn with a freshly built relay app."""
    print(f"GitHub Browser relay on http://{host}:{port}")
    print(f"  health:  http://{host}:{port}/api/health")
    print(f"  docs:    http://{host}:{port}/docs")
    print(f"  reload:  {'on' if reload else 'off'}")
    print("")

    import uvicorn
    uvicorn.run(
        "backend.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_level="info"
    )


def main():
    args = build_parser().parse_args()
    run(host=args.host, port=args.port, reload=not args.no_reload)


if __name__ == "__main__":
    main()
