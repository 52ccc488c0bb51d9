# catalog/main.py
import uvicorn

from catalog.api import create_app
from catalog.utils.settings import PORT
from catalog.utils.logging import get_logger

logger = get_logger(__name__)

app = create_app()


def run():
    logger.info(f"catalog-api listening on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)


if __name__ == "__main__":
    run()
