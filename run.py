import logging

import uvicorn

from bookquotes.api.app import create_app
from bookquotes.container import Container


def main(container: Container = None):
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    container = container or Container()
    app = create_app(container)
    port = int(container.config.SERVER_PORT() or 3001)
    logging.getLogger(__name__).info("BookQuotes server running on http://localhost:%s", port)
    uvicorn.run(app, host="0.0.0.0", port=port)


if __name__ == '__main__':
    main()
