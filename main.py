import uvicorn

from app.config import Config
from app.logs import configure_logging


CONFIG = Config()


def main() -> None:
    configure_logging(CONFIG.log_level)
    uvicorn.run(
        "app.app:app",
        host="127.0.0.1",
        port=8000,
        log_config=None,
    )


if __name__ == "__main__":
    main()
