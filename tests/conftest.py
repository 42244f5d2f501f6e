"""The main entry point for pytest fixtures.

This will run before any tests are executed when `import pytest` is called.
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from chatuix.api.main import create_app
from chatuix.core.dispatcher import Context, make_context

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:^7} | {file.name}:{line} | {message}"


def _setup_logging() -> None:
    """Add a file sink to the default pytest console logging."""
    # logs/pytest_YYYYMMDD.log
    logs_dir = Path(__file__).resolve().parent.parent / "logs"
    logs_dir.mkdir(exist_ok=True)
    logfile = logs_dir / f"pytest_{datetime.now():%Y%m%d}.log"

    logger.add(
        logfile,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",
        retention="7 days",
        compression="zip",
    )

    # Intercept stdlib logging so everything funnels through Loguru
    class InterceptHandler(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            try:
                level = logger.level(record.levelname).name
            except ValueError:
                level = logging.getLevelName(record.levelno)
            logger.opt(depth=6, exception=record.exc_info, colors=False).log(
                level, record.getMessage()
            )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def pytest_configure(config: pytest.Config) -> None:
    """Pytest configuration hook to add a file sink to default pytest logging."""
    _setup_logging()


@pytest.fixture
def empty_context() -> Context:
    """A fresh, empty conversation context."""
    return make_context()


@pytest.fixture
def history() -> Callable[..., List[Dict[str, Any]]]:
    """Build a transcript of plain message dicts.

    Returns:
      a function you can call with the user texts, oldest first
    """

    def _build(*texts: str) -> List[Dict[str, Any]]:
        return [{"role": "user", "content": t} for t in texts]

    return _build


@pytest.fixture
def client() -> TestClient:
    """A TestClient over a freshly built API app."""
    return TestClient(create_app())
