"""Integration test switches.

Tests marked ``integration`` only run with ``--integration``, unless they are
also marked ``ci_safe`` (every HTTP call stubbed), in which case they always
run.
"""

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--integration",
        action="store_true",
        default=False,
        help="also run integration tests that are not marked ci_safe",
    )


def pytest_configure(config):
    for marker in (
        "integration: exercises several components together",
        "ci_safe: integration test with all HTTP stubbed; always runs",
    ):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    if config.getoption("--integration", default=False):
        return
    skip = pytest.mark.skip(reason="needs --integration")
    for item in items:
        if "integration" in item.keywords and "ci_safe" not in item.keywords:
            item.add_marker(skip)
