"""
Production server launcher from the repository root.

Loads environment variables and serves the Business Goal Engine API via
Waitress.
"""
import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

from waitress import serve  # noqa: E402
from config.wsgi import application  # noqa: E402
from core.utils.config import get_setting  # noqa: E402

logging.basicConfig(
    level=get_setting().LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080


def resolve_port() -> int:
    port_env = os.getenv("PORT") or os.getenv("APP_PORT") or str(DEFAULT_PORT)
    try:
        return int(port_env)
    except ValueError:
        logger.warning(
            "Invalid port value '%s' from environment. Falling back to %s.",
            port_env,
            DEFAULT_PORT,
        )
        return DEFAULT_PORT


def main() -> None:
    port = resolve_port()
    threads = int(os.getenv("WAITRESS_THREADS", "4"))

    logger.info("Starting Business Goal Engine API with Waitress")
    logger.info("Server: http://0.0.0.0:%s", port)
    logger.info("API Docs: http://0.0.0.0:%s/api/docs", port)
    logger.info("Health Check: http://0.0.0.0:%s/api/health", port)
    logger.info("Worker Threads: %s", threads)

    try:
        serve(application, host="0.0.0.0", port=port, threads=threads)
    except KeyboardInterrupt:
        logger.info("Server shutdown requested")
    except Exception as exc:  # pragma: no cover - logging unexpected errors
        logger.error("Server error: %s", exc, exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
