"""Uvicorn launcher with environment-driven concurrency controls."""

import uvicorn

from reading_engine import config


def run() -> None:
    uvicorn.run(
        "reading_engine.main:app",
        host=config.HOST,
        port=config.PORT,
        workers=config.WEB_CONCURRENCY,
        backlog=config.env_int("UVICORN_BACKLOG", 2048, minimum=16),
        timeout_keep_alive=config.env_int("UVICORN_TIMEOUT_KEEP_ALIVE", 5, minimum=1),
        limit_concurrency=config.env_optional_int("UVICORN_LIMIT_CONCURRENCY"),
        log_level=config.UVICORN_LOG_LEVEL,
    )


if __name__ == "__main__":
    run()
