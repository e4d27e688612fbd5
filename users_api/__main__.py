"""Run the Users API with uvicorn: ``python -m users_api``"""

# External package imports
import uvicorn

# Local application imports
from .core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "users_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
