import logging

from bracketeer.brackets import generate_rounds
from bracketeer.cli import main
from bracketeer.utils import PACKAGE_LOGGER, set_verbosity, setup_logger


def _stream_handlers():
    return [
        h
        for h in logging.getLogger(PACKAGE_LOGGER).handlers
        if type(h) is logging.StreamHandler
    ]


def test_library_logger_is_silent_by_default():
    logger = setup_logger("bracketeer.example")

    assert logger.name == "bracketeer.example"
    handlers = logging.getLogger(PACKAGE_LOGGER).handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
    assert _stream_handlers() == []


def test_generate_rounds_writes_nothing_to_stderr(capsys):
    generate_rounds(4, ["A", "B", "C", "D"], format="round-robin")

    assert capsys.readouterr().err == ""


def test_set_verbosity_installs_one_stream_handler():
    set_verbosity(True)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG

    set_verbosity(False)
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    assert len(_stream_handlers()) == 1


def test_cli_reports_progress_on_stderr(capsys):
    code = main(["rounds", "--format", "round-robin", "--count", "4"])

    assert code == 0
    assert "[INFO] bracketeer.brackets" in capsys.readouterr().err
