"""Tests for the pytest plugin, run through pytester."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def project(pytester: pytest.Pytester) -> pytest.Pytester:
    data = pytester.mkdir("data")
    (data / "a.txt").write_text("hello world", encoding="utf-8")
    return pytester


def test_inspect_file_resolves_relative_to_test_module(project: pytest.Pytester) -> None:
    project.makepyfile(
        test_module="""
        def test_relative(inspect_file):
            inspector = inspect_file("data/a.txt")
            assert inspector.is_file().contains("hello") is inspector
            inspect_file("data").is_directory()
            inspect_file("data/missing.txt").not_exists()
        """
    )
    result = project.runpytest()
    result.assert_outcomes(passed=1)


def test_failure_report_has_fsinspect_section(project: pytest.Pytester) -> None:
    project.makepyfile(
        test_module="""
        def test_contains(inspect_file):
            inspect_file("data/a.txt").contains("bye")
        """
    )
    result = project.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(
        [
            "*InspectionError: File data/a.txt does not contain a certain string!*",
            "*- fsinspect -*",
            "*Expected*bye*",
            "*Actual*hello world*",
        ]
    )


def test_failure_without_payload_has_no_section(project: pytest.Pytester) -> None:
    project.makepyfile(
        test_module="""
        def test_exists(inspect_file):
            inspect_file("data/missing.txt").exists()
        """
    )
    result = project.runpytest()
    result.assert_outcomes(failed=1)
    result.stdout.fnmatch_lines(["*does not exist*"])
    result.stdout.no_fnmatch_line("*- fsinspect -*")


def test_ini_option_loads_config(project: pytest.Pytester) -> None:
    project.path.joinpath("fsinspect.json").write_text(
        json.dumps({"diagnostics": {"max_length": 5}}), encoding="utf-8"
    )
    project.makeini(
        """
        [pytest]
        fsinspect_config = fsinspect.json
        """
    )
    project.makepyfile(
        test_module="""
        import pytest
        from fsinspect import InspectionError

        def test_config(inspect_file, fsinspect_config):
            assert fsinspect_config.diagnostics.max_length == 5
            with pytest.raises(InspectionError) as excinfo:
                inspect_file("data/a.txt").contains("bye")
            assert excinfo.value.actual == "hello..."
        """
    )
    result = project.runpytest()
    result.assert_outcomes(passed=1)
