# test/test_logging_config.py
import logging

from plotexport.logging_config import setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "export.log"

    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))

    assert logger.name == "plotexport"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 2

    logging.getLogger("plotexport.io.download").info("hello from child")
    for h in logger.handlers:
        h.flush()
    assert "hello from child" in log_file.read_text(encoding="utf-8")

    for h in list(logger.handlers):
        h.close()
        logger.removeHandler(h)


def test_setup_logging_console_only():
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)
    finally:
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)


def test_setup_logging_uses_package_format(tmp_path):
    log_file = tmp_path / "fmt.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    try:
        logging.getLogger("plotexport.core.bounds").warning("skipped %d", 3)
        for h in logger.handlers:
            h.flush()
        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        assert line.endswith(" - plotexport.core.bounds - WARNING - skipped 3")
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
