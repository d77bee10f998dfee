#!/usr/bin/env python3
"""
TravelVerse Scoring Engine Runner Script.

This script starts the FastAPI application with uvicorn.

Usage:
    python run.py                    # Mode from ENVIRONMENT (development: auto-reload)
    python run.py --production       # Production mode
    python run.py --port 9000        # Override settings.PORT

Defaults come from travelverse.config.settings, so HOST, PORT, ENVIRONMENT
and DEBUG can be set in the environment or in .env.
"""

import argparse
from typing import Any, Dict, List, Optional

import uvicorn

from travelverse.config import settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=f"{settings.APP_NAME} Server")
    parser.add_argument(
        "--production",
        action="store_true",
        default=settings.ENVIRONMENT.lower() == "production",
        help="Run in production mode (no auto-reload); default from ENVIRONMENT"
    )
    parser.add_argument(
        "--host",
        default=settings.HOST,
        help=f"Host to bind to (default: {settings.HOST})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.PORT,
        help=f"Port to bind to (default: {settings.PORT})"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (production only)"
    )
    return parser


def build_uvicorn_config(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate parsed arguments into uvicorn.run keyword arguments."""
    config = {
        "app": "travelverse.main:app",
        "host": args.host,
        "port": args.port,
        "log_level": "debug" if settings.DEBUG else "info",
    }

    if args.production:
        config["workers"] = args.workers
        config["reload"] = False
    else:
        config["reload"] = True
        config["reload_dirs"] = ["travelverse"]

    return config


def main(argv: Optional[List[str]] = None):
    """Run the TravelVerse Scoring Engine server."""
    args = build_parser().parse_args(argv)
    config = build_uvicorn_config(args)

    if args.production:
        print(f"Starting {settings.APP_NAME} in PRODUCTION mode...")
        print(f"Workers: {args.workers}")
    else:
        print(f"Starting {settings.APP_NAME} in DEVELOPMENT mode...")
        print("Auto-reload enabled")

    print(f"Server: http://{args.host}:{args.port}")
    print(f"API Docs: http://{args.host}:{args.port}/docs")
    print(f"Health Check: http://{args.host}:{args.port}{settings.API_V1_PREFIX}/health")
    print("-" * 50)

    uvicorn.run(**config)


if __name__ == "__main__":
    main()
