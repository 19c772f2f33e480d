#!/usr/bin/env python3
"""Start the Trending News Aggregator API server.

This script starts the FastAPI application with uvicorn. Host and port
default to the API_HOST and PORT settings.

Usage:
    python scripts/start_server.py

Or with custom settings:
    python scripts/start_server.py --host 127.0.0.1 --port 8080 --reload
"""

import argparse
import sys

import uvicorn

from news_aggregator.core.config import settings


def main():
    """Start the API server."""
    parser = argparse.ArgumentParser(
        description="Start the Trending News Aggregator API"
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"Host to bind to (default: {settings.api_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload on code changes",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level (default: info)",
    )

    args = parser.parse_args()

    print("=" * 80)
    print("  TRENDING NEWS AGGREGATOR")
    print("=" * 80)
    print(f"\nStarting API server...")
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Log Level: {args.log_level}")
    print(f"\nEndpoints:")
    print(f"   Trending: http://{args.host}:{args.port}/trending?category=technology")
    print(f"   Health: http://{args.host}:{args.port}/api/v1/health")
    print(f"   Swagger UI: http://{args.host}:{args.port}/docs")
    print("\n" + "=" * 80 + "\n")

    try:
        uvicorn.run(
            "news_aggregator.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
            log_level=args.log_level,
        )
    except KeyboardInterrupt:
        print("\n\nServer stopped by user")
        return 0
    except Exception as e:
        print(f"\n\nError starting server: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
