import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Remove the handlers the CLI installs on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in root.handlers[:]:
        # pytest's own capture handlers are subclasses and are left alone
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
