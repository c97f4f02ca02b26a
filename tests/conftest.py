"""
Pytest configuration and fixtures for strictval tests

This module provides shared registries, engines and YAML config fixtures.
"""
import textwrap
from pathlib import Path
from typing import Any, Callable

import pytest

from strictval.core.models import ValidationConfig
from strictval.core.rules import RuleEngine, RuleRegistry


# =======================
# PYTEST CONFIGURATION
# =======================

def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "unit: Unit tests for a single module"
    )
    config.addinivalue_line(
        "markers", "scenario: End-to-end rule pipeline scenarios through RuleEngine"
    )


# =======================
# REGISTRY FIXTURES
# =======================

@pytest.fixture(scope="session")
def strict_registry() -> RuleRegistry:
    """Strict registry shared by every test (read-only after construction)"""
    return RuleRegistry.default(mode="strict")


@pytest.fixture(scope="session")
def loose_registry() -> RuleRegistry:
    """Loose registry shared by every test"""
    return RuleRegistry.default(mode="loose")


# =======================
# ENGINE FIXTURES
# =======================

@pytest.fixture
def engine(strict_registry) -> RuleEngine:
    """Fresh strict engine per test"""
    return RuleEngine(registry=strict_registry)


@pytest.fixture
def run_rules(strict_registry) -> Callable[[dict[str, Any], dict[str, Any]], bool]:
    """
    Run a rules mapping against data on a fresh strict engine

    Returns:
        Function (rules, data) -> overall pass/fail
    """
    def _run(rules: dict[str, Any], data: dict[str, Any]) -> bool:
        return RuleEngine(registry=strict_registry).set_rules(rules).run(data).passed

    return _run


@pytest.fixture
def group_config() -> ValidationConfig:
    """Config with one rule group carrying a custom error message"""
    return ValidationConfig(
        groups={
            "groupA": {
                "rules": {"foo": "required|min_length[5]"},
                "errors": {"foo": {"min_length": "Shame, shame. Too short."}},
            }
        }
    )


# =======================
# FILE FIXTURES
# =======================

@pytest.fixture
def write_yaml(tmp_path) -> Callable[[str], Path]:
    """
    Write YAML content to a temporary file

    Returns:
        Function taking YAML text and returning the file path
    """
    def _write(content: str) -> Path:
        path = tmp_path / "rules.yaml"
        path.write_text(textwrap.dedent(content))
        return path

    return _write
