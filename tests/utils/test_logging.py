import logging

from dateversionlib.utils.logging import configure_logging, silenced, suppress_log_level


def test_suppress_log_level_restores(caplog):
    log = logging.getLogger("dateversionlib.test")
    with caplog.at_level(logging.INFO):
        with suppress_log_level(logging.WARNING):
            log.warning("hidden")
        log.warning("visible")

    assert "hidden" not in caplog.text
    assert "visible" in caplog.text


def test_silenced(caplog):
    log = logging.getLogger("dateversionlib.test")
    with caplog.at_level(logging.INFO):
        with silenced(True):
            log.error("hidden")
        with silenced(False):
            log.info("visible")

    assert "hidden" not in caplog.text
    assert "visible" in caplog.text


def test_configure_logging_levels():
    configure_logging(0)
    assert logging.getLogger().level == logging.WARNING
    configure_logging(1)
    assert logging.getLogger().level == logging.INFO
    configure_logging(3)
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(0)
