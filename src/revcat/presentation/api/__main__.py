"""Run the API with uvicorn: ``python -m revcat.presentation.api``."""

import uvicorn

from revcat_config.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "revcat.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
