"""Run the development server: python -m yelpcamp"""

import uvicorn

from yelpcamp.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "yelpcamp.main:app", host=settings.host, port=settings.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
