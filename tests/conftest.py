import logging

import pytest

from valuetypes.core.logger import PACKAGE_LOGGER, _PackageFilter


@pytest.fixture(autouse=True)
def _reset_package_logging():
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if any(isinstance(f, _PackageFilter) for f in handler.filters):
            root.removeHandler(handler)
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.NOTSET)
