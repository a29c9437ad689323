"""
Shared pytest configuration for the registration test suite.

This module applies the run configuration from :mod:`config` to the
pytest plugins the suite depends on, and provides the test data
fixtures shared by unit and E2E tests.

Key Concepts Demonstrated:
- Environment-driven browser selection (BROWSER)
- CI-only retries and serial execution (CI)
- Focused runs with the ``only`` marker, rejected under CI
- Test data factory fixtures
"""

from __future__ import annotations

import logging
import os

import pytest

from config import get_browser_projects, get_config
from shared import data_factory
from shared.data_factory import InvalidUserData, RegistrationData, UserData

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Run Configuration Hooks
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Apply browser selection, retries and the data seed."""
    run_config = get_config()
    projects = get_browser_projects()

    # Command line values win over the environment.
    if hasattr(config.option, "browser") and not config.option.browser:
        config.option.browser = [project.browser_name for project in projects]
        channels = [project.channel for project in projects if project.channel]
        if channels and not config.option.browser_channel:
            config.option.browser_channel = channels[0]

    if hasattr(config.option, "reruns") and not config.option.reruns:
        config.option.reruns = run_config.RETRIES

    seed = os.environ.get("TEST_DATA_SEED")
    if seed:
        data_factory.seed(_worker_seed(config, seed))


def _worker_seed(config, seed: str) -> int:
    """Offset the run seed by the xdist worker number so workers draw different data."""
    try:
        value = int(seed)
    except ValueError:
        raise pytest.UsageError(f"TEST_DATA_SEED must be an integer, got {seed!r}") from None

    workerinput = getattr(config, "workerinput", None)
    if workerinput:
        # Worker ids look like "gw0", "gw1", ...
        value += int(workerinput["workerid"].removeprefix("gw"))
    return value


def pytest_report_header(config):
    run_config = get_config()
    browsers = ", ".join(project.name for project in get_browser_projects())
    return [
        f"target: {run_config.BASE_URL}",
        f"browsers: {browsers}",
        f"run config: {run_config.__name__} (retries={run_config.RETRIES})",
    ]


@pytest.hookimpl(optionalhook=True)
def pytest_xdist_auto_num_workers(config):
    """Serialize ``-n auto`` under CI; otherwise let xdist decide."""
    return get_config().WORKERS


def pytest_collection_modifyitems(config, items):
    """Restrict the run to tests marked ``only``, unless running under CI."""
    focused = [item for item in items if item.get_closest_marker("only")]
    if not focused:
        return

    if get_config().FORBID_ONLY:
        names = ", ".join(item.nodeid for item in focused)
        raise pytest.UsageError(f"Tests marked 'only' are not allowed on CI: {names}")

    deselected = [item for item in items if not item.get_closest_marker("only")]
    logger.info(f"Focused run: {len(focused)} tests marked 'only'")
    config.hook.pytest_deselected(items=deselected)
    items[:] = focused


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_user_data() -> UserData:
    """Account fields with a matching, policy-conformant password."""
    return data_factory.generate_valid_user_data()


@pytest.fixture
def mismatched_user_data() -> UserData:
    """Account fields whose password and confirmation differ."""
    return data_factory.generate_user_data_with_mismatched_passwords()


@pytest.fixture
def registration_data() -> RegistrationData:
    return data_factory.generate_registration_data()


@pytest.fixture
def australian_registration_data() -> RegistrationData:
    """Complete registration record with an Australian address."""
    return data_factory.generate_australian_registration_data()


@pytest.fixture
def invalid_user_data() -> InvalidUserData:
    return data_factory.generate_invalid_user_data()
