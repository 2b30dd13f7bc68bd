from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from fakegen.utils.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in [h for h in logger.handlers if h.get_name() == "fakegen-stderr"]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
