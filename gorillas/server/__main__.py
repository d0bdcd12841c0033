# gorillas/server/__main__.py
"""Entry point: python -m gorillas.server"""

from __future__ import annotations

import argparse

import uvicorn

from .config import settings


def main() -> None:
    parser = argparse.ArgumentParser(description="Gorillas Match Controller")
    parser.add_argument("--host", type=str, default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--seed", type=int, default=settings.SEED, help="Seed for city and wind generation")
    args = parser.parse_args()

    from . import create_app

    app = create_app(seed=args.seed)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
