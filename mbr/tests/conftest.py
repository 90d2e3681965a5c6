import datetime
import io
import logging
import pathlib

import pytest

from mbr.core.config import get_config, reset_config, set_config, ToleranceConfig

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport (with .outcome) to the item so fixtures can see the
    # outcome in teardown.
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture the 'mbr' logger family for each test into an in-memory buffer
    and write it to a file only when the test fails.
    """
    # the 'mbr' family does not propagate, so hook it directly
    logger = logging.getLogger("mbr")
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    prev_level = logger.level
    logger.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        logger.removeHandler(handler)
        logger.setLevel(prev_level)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and getattr(rep, "outcome", None) == "failed":
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            LOG_DIR.mkdir(exist_ok=True)
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


@pytest.fixture(autouse=True)
def default_tolerance():
    """Run every test against the default tolerance configuration."""
    token = set_config(ToleranceConfig())
    try:
        yield get_config()
    finally:
        reset_config(token)


@pytest.fixture
def caplog_mbr():
    """Buffer receiving every record of the 'mbr' logger family."""
    logger = logging.getLogger("mbr")
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    try:
        yield buf
    finally:
        logger.removeHandler(handler)
