#!/usr/bin/env python3
"""
Startup script for the SmartDrive Routing API server.
"""

import argparse
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description="SmartDrive Routing API Server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"],
                        help="Log level")
    args = parser.parse_args()

    print(f"🚗 SmartDrive Routing API on http://{args.host}:{args.port} (docs at /docs)")

    # uvicorn imports "api.main" relative to the project root
    os.chdir(os.path.dirname(os.path.abspath(__file__)))
    uvicorn.run("api.main:app", host=args.host, port=args.port,
                reload=args.reload, log_level=args.log_level)


if __name__ == "__main__":
    main()
