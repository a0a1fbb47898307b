from __future__ import annotations

import logging
from typing import Iterator

import pytest

from logregistry.services import log_registry


@pytest.fixture(autouse=True)
def fresh_registry() -> Iterator[None]:
    log_registry.destroy()
    yield
    log_registry.destroy()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
