import logging

import uvicorn

from rsvp_bridge.config import load_config
from rsvp_bridge.logging_config import setup_logging


# ruff: noqa: D103
def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)

    config = load_config()
    logger.info(f"rsvp-bridge listening on port {config['PORT']}")

    uvicorn.run("rsvp_bridge.api.main:app", host=config["HOST"], port=config["PORT"])


if __name__ == "__main__":
    main()
