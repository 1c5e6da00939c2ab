"""Tests for commit_colour.core.log — silent by default, stderr with --debug."""

import io
import logging

from commit_colour.core.log import configure_logging, get_logger


class TestLogging:
    def test_silent_by_default(self, capsys):
        get_logger().warning('should not appear')
        assert capsys.readouterr().err == ''

    def test_configure_writes_debug(self):
        stream = io.StringIO()
        logger = configure_logging(stream=stream)
        logger.debug('NoOutput: empty')
        assert stream.getvalue() == 'DEBUG NoOutput: empty\n'

    def test_configure_twice_adds_one_handler(self):
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())
        handlers = [h for h in get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert len(handlers) == 1
