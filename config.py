"""
Run configuration module.

This module defines configuration classes for the environments the suite
runs in (local workstation, CI). Values are loaded from environment
variables with sensible defaults, and the browser selection is resolved
into the list of Playwright browser projects to run against.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Config:
    """Base configuration with default settings."""

    BASE_URL: str = os.environ.get(
        "TEST_BASE_URL", "https://www.advantageonlineshopping.com"
    )

    # Playwright timeouts are in milliseconds
    LOGIN_INDICATOR_TIMEOUT_MS: int = 5000
    PAGE_LOAD_TIMEOUT_MS: int = 10000

    # Seconds allowed for the pre-run reachability probe of BASE_URL
    SITE_CHECK_TIMEOUT: int = int(os.environ.get("SITE_CHECK_TIMEOUT", "30"))

    VIEWPORT: dict = {"width": 1280, "height": 720}
    ARTIFACTS_DIR: str = "test-results"

    RETRIES: int = 0
    WORKERS: int | None = None
    FORBID_ONLY: bool = False


class LocalConfig(Config):
    """Workstation configuration: no retries, unrestricted workers."""


class CIConfig(Config):
    """CI configuration: retry flaky scenarios, run serially, no focused tests."""

    RETRIES: int = 2
    WORKERS: int | None = 1
    FORBID_ONLY: bool = True


def is_ci() -> bool:
    """Return True when the CI environment variable is set to a truthy value."""
    return os.environ.get("CI", "").strip().lower() not in ("", "0", "false", "no")


def get_config(ci: bool | None = None) -> type[Config]:
    """
    Get the configuration class for the current environment.

    Args:
        ci: Force CI (True) or local (False) configuration.
            If None, uses the CI environment variable.

    Returns:
        Configuration class for the environment.
    """
    if ci is None:
        ci = is_ci()
    return CIConfig if ci else LocalConfig


# -----------------------------------------------------------------------------
# Browser selection
# -----------------------------------------------------------------------------

DEFAULT_BROWSER = "chromium"


@dataclass(frozen=True)
class BrowserProject:
    """One browser to run the suite against."""

    name: str
    browser_name: str
    channel: str | None = None


BROWSER_PROJECTS: dict[str, list[BrowserProject]] = {
    "chromium": [BrowserProject("chromium", "chromium")],
    "firefox": [BrowserProject("firefox", "firefox")],
    "webkit": [BrowserProject("webkit", "webkit")],
    "edge": [BrowserProject("msedge", "chromium", channel="msedge")],
    "all": [
        BrowserProject("chromium", "chromium"),
        BrowserProject("firefox", "firefox"),
        BrowserProject("webkit", "webkit"),
    ],
}


def get_browser_projects(browser: str | None = None) -> list[BrowserProject]:
    """
    Resolve a browser selection into browser projects.

    Args:
        browser: One of chromium, firefox, webkit, edge or all.
                 If None, uses the BROWSER environment variable.

    Returns:
        Browser projects to run. Unsupported values fall back to chromium.
    """
    if browser is None:
        browser = os.environ.get("BROWSER") or DEFAULT_BROWSER
    selected = browser.strip().lower()

    projects = BROWSER_PROJECTS.get(selected)
    if projects is None:
        logger.warning(
            f"Browser '{browser}' not supported. Using {DEFAULT_BROWSER} as default."
        )
        projects = BROWSER_PROJECTS[DEFAULT_BROWSER]
    return list(projects)
