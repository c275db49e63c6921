from loguru import logger

from termblock.logging_utils import configure_logging


def _termblock_logger():
    return logger.patch(lambda record: record.update(name="termblock.lines"))


def test_configure_logging_replaces_its_own_sink(capsys):
    configure_logging("info")
    configure_logging("info")
    _termblock_logger().info("classified block")
    assert capsys.readouterr().err.count("classified block") == 1
    configure_logging("warning")


def test_configure_logging_respects_level(capsys):
    configure_logging("warning")
    _termblock_logger().info("hidden message")
    _termblock_logger().warning("shown message")
    err = capsys.readouterr().err
    assert "hidden message" not in err
    assert "shown message" in err
