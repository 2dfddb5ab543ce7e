"""Run the data entry page locally with uvicorn."""
from __future__ import annotations

import uvicorn

from dataentry.app import create_app
from dataentry.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
