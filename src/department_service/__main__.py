# This module starts the department service with uvicorn.
# It exists so operators can run the service with `python -m src.department_service`.

from __future__ import annotations

import argparse

import uvicorn

from src.department_service.dependencies import load_department_config


def parse_args() -> argparse.Namespace:
    config = load_department_config()
    parser = argparse.ArgumentParser(description="Run the department service")
    parser.add_argument("--host", default=config.host, help="Bind address")
    parser.add_argument("--port", type=int, default=config.port, help="Bind port")
    parser.add_argument("--workers", type=int, default=1, help="Number of worker processes")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    uvicorn.run(
        "src.department_service.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        workers=args.workers,
    )


if __name__ == "__main__":
    main()
