from __future__ import annotations

import logging

from yardsale.core.log import setup_logging


def test_handler_attached_once():
    log = setup_logging("INFO")
    before = len(log.handlers)
    setup_logging("DEBUG")
    assert len(log.handlers) == before
    assert log.level == logging.DEBUG
    setup_logging("INFO")


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
