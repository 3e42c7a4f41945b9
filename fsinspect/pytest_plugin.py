#!/usr/bin/env python3
"""
pytest integration for fsinspect.

Provides the ``inspect_file`` fixture, which resolves subjects relative to
the requesting test module, and attaches an expected/actual table to the
report of any test failing with an InspectionError.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from .config import Config
from .config_schemas.schemas import FsInspectConfig
from .core.inspector import FileInspector
from .display import format_failure
from .errors import InspectionError

CONFIG_INI_OPTION = "fsinspect_config"
REPORT_SECTION = "fsinspect"


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini(
        CONFIG_INI_OPTION,
        help="Path to a JSON fsinspect configuration file, relative to the rootdir",
        default="",
    )


@pytest.fixture(scope="session")
def fsinspect_config(pytestconfig: pytest.Config) -> FsInspectConfig:
    """Typed fsinspect configuration for the test session."""
    config_path = pytestconfig.getini(CONFIG_INI_OPTION)
    if config_path:
        config_path = str(Path(pytestconfig.rootpath) / config_path)
    return Config(config_path or None).typed_config


@pytest.fixture
def inspect_file(
    request: pytest.FixtureRequest, fsinspect_config: FsInspectConfig
) -> Callable[..., FileInspector]:
    """Factory building inspectors relative to the test module's directory."""
    base_dir = Path(request.path).parent

    def factory(subject, **kwargs) -> FileInspector:
        kwargs.setdefault("config", fsinspect_config)
        return FileInspector(subject, base_dir, **kwargs)

    return factory


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo):
    outcome = yield
    report = outcome.get_result()
    if call.excinfo is None or not isinstance(call.excinfo.value, InspectionError):
        return
    error = call.excinfo.value
    if error.has_payload:
        report.sections.append((REPORT_SECTION, format_failure(error)))
