"""Uvicorn entrypoint for the CostSplit HTTP service."""

from __future__ import annotations

import uvicorn

from costsplit.api.app import create_app
from costsplit.core.config import AppSettings


def main() -> None:
    settings = AppSettings()
    uvicorn.run(
        create_app(settings),
        host=settings.api.host,
        port=settings.api.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
