"""Run the Decision Oversight API with uvicorn."""

import logging
import os

import uvicorn

from decision_oversight.api.app import create_app
from decision_oversight.models.config import ServiceConfig


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    app = create_app(config=ServiceConfig.from_env())
    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
