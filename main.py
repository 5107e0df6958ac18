"""Process entry point for the transcription gateway."""

import sys

import uvicorn
from ddtrace import patch_all
from dotenv import load_dotenv
from gateway_common import setup_logging

from application import create_app
from config import load_config
from exceptions import MissingConfigurationError

patch_all()

logger = setup_logging()


def run():
    """Loads configuration and serves the gateway. Exits 1 on fatal config errors."""
    load_dotenv()

    try:
        config = load_config()
    except MissingConfigurationError as e:
        logger.critical("Fatal configuration error", extra={"variable": e.variable})
        sys.exit(1)
    except ValueError as e:
        logger.critical("Invalid configuration", extra={"error": str(e)})
        sys.exit(1)

    setup_logging(config.server.log_level)

    app = create_app(config)
    uvicorn.run(app, host="0.0.0.0", port=config.server.port, log_config=None)


if __name__ == "__main__":
    run()
