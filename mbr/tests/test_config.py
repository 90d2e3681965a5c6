"""Tolerance configuration and the per-context active configuration."""
import math

import pytest

from mbr.core.constants import EPSILON, PRECISION
from mbr.core.config import ToleranceConfig, get_config, reset_config, set_config, use_config
from mbr.core.point import Pt


def test_defaults():
    cfg = get_config()
    assert cfg.epsilon == EPSILON
    assert cfg.wkt_precision == PRECISION
    assert cfg.to_dict() == {'epsilon': EPSILON, 'wkt_precision': PRECISION}


@pytest.mark.parametrize("kwargs", [
    {'epsilon': -1.0}, {'epsilon': math.nan}, {'epsilon': math.inf},
    {'wkt_precision': -1}, {'wkt_precision': 2.5},
])
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValueError):
        ToleranceConfig(**kwargs)


def test_from_dict_ignores_unknown_keys(caplog_mbr):
    cfg = ToleranceConfig.from_dict({'epsilon': 1e-6, 'colour': 'blue'})
    assert cfg.epsilon == 1e-6
    assert cfg.wkt_precision == PRECISION
    assert 'colour' in caplog_mbr.getvalue()


def test_set_and_reset():
    token = set_config(ToleranceConfig(epsilon=0.5))
    try:
        assert get_config().epsilon == 0.5
        assert Pt(0.0, 0.0) == Pt(0.25, 0.0)
    finally:
        reset_config(token)
    assert get_config().epsilon == EPSILON


def test_use_config_overrides_and_restores():
    base = ToleranceConfig(wkt_precision=4)
    with use_config(base, epsilon=0.1) as active:
        assert active.wkt_precision == 4
        assert active.epsilon == 0.1
        assert get_config() is active
    assert get_config() == ToleranceConfig()


def test_use_config_restores_on_error():
    with pytest.raises(RuntimeError):
        with use_config(epsilon=0.1):
            raise RuntimeError("boom")
    assert get_config().epsilon == EPSILON

