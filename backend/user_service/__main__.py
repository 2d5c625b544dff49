"""
Run the service with uvicorn: `python -m user_service`.
"""
import uvicorn

from user_service.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "user_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.effective_log_level.lower(),
    )


if __name__ == "__main__":
    main()
