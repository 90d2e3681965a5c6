"""Tests for the 'mbr' logger family helpers."""
import logging

from mbr.core.logging_utils import ROOT_NAME, configure_logging, get_logger


def test_get_logger_namespaced():
    assert get_logger('mbr.rect').name == 'mbr.rect'
    assert get_logger('custom').name == 'mbr.custom'
    assert get_logger(ROOT_NAME).name == 'mbr'


def test_root_is_isolated():
    get_logger('mbr.rect')
    root = logging.getLogger(ROOT_NAME)
    assert root.propagate is False
    assert any(isinstance(h, logging.StreamHandler) and not isinstance(h, logging.NullHandler)
               for h in root.handlers)


def test_configure_logging_levels():
    root = logging.getLogger(ROOT_NAME)
    prev = root.level
    try:
        assert configure_logging('warning').level == logging.WARNING
        assert configure_logging(logging.DEBUG).level == logging.DEBUG
        assert configure_logging('not-a-level').level == logging.INFO
    finally:
        root.setLevel(prev)


def test_child_inherits_level():
    log = get_logger('mbr.rect')
    assert log.level == logging.NOTSET
    log = get_logger('mbr.rect', level='ERROR')
    assert log.level == logging.ERROR
    get_logger('mbr.rect')  # restore NOTSET for other tests
