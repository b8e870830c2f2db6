"""Process entry point: configure logging and serve the app."""

import logging

from visit_counter import create_app
from visit_counter.config import settings

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    app = create_app()
    logger.info(f"Backend server running on port {settings.PORT}")
    app.run(host=settings.HOST, port=settings.PORT, debug=settings.DEBUG, use_reloader=False, threaded=True)


if __name__ == '__main__':
    main()
