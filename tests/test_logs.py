from __future__ import annotations

import logging
import re

from mrprime.logs import ROOT, configure_logging, reset_logging


def test_configure_replaces_handlers(tmp_path):
    path = tmp_path / "a.log"
    configure_logging("INFO", str(path))
    configure_logging("INFO", str(path))
    logger = logging.getLogger(ROOT)
    assert len(logger.handlers) == 2
    assert logger.propagate is False

    logging.getLogger("mrprime.test").info("event key=%d", 5)
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert re.fullmatch(r"\d{4}-\d\d-\d\dT\d\d:\d\d:\d\dZ INFO mrprime\.test event key=5", lines[0])

def test_level_filters(capsys):
    configure_logging(logging.WARNING)
    logging.getLogger("mrprime.test").info("hidden")
    logging.getLogger("mrprime.test").warning("shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "WARNING mrprime.test shown" in err

def test_reset_restores_defaults():
    configure_logging("DEBUG")
    reset_logging()
    logger = logging.getLogger(ROOT)
    assert logger.handlers == []
    assert logger.propagate is True
    assert logger.level == logging.NOTSET
