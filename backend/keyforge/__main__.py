"""python -m keyforge — serve the API with uvicorn on the configured host/port."""

import uvicorn

from keyforge.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("keyforge.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
