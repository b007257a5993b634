"""Packaging correctness verification for sorted-diff.

Tests validate that:
- The top-level import exposes the documented public API
- py.typed marker is present in the wheel
- Pytest plugin entry point is registered
- Package metadata is correct

These tests inspect the built wheel and current installation rather than
creating temporary virtualenvs (faster, more reliable in CI).
"""

from __future__ import annotations

import subprocess
import sys
import zipfile
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestBaseInstall:
    """Verify the base install works without optional extras."""

    def test_import_sorted_diff(self):  # type: ignore[no-untyped-def]
        """Top-level import succeeds."""
        import sorted_diff

        assert hasattr(sorted_diff, "compare")
        assert hasattr(sorted_diff, "is_equivalent")
        assert hasattr(sorted_diff, "normalize_text")
        assert hasattr(sorted_diff, "sorted_repr")

    def test_compare_basic(self):  # type: ignore[no-untyped-def]
        """compare() works with the default config."""
        from sorted_diff import compare

        result = compare("{b: 1, a: 2}", "{a: 2, b: 1}")
        assert result.equal is True


class TestWheelContents:
    """Verify the built wheel contains required files."""

    @pytest.fixture(scope="class")
    def wheel_path(self) -> Path:
        """Build a fresh wheel and return its path."""
        dist_dir = PROJECT_ROOT / "dist"
        # Use poetry build since that's the project's build system
        try:
            result = subprocess.run(
                ["poetry", "build", "-f", "wheel"],
                cwd=str(PROJECT_ROOT),
                capture_output=True,
                text=True,
            )
        except FileNotFoundError:
            pytest.skip("poetry is not installed")
        if result.returncode != 0:
            pytest.skip(f"poetry build failed: {result.stderr}")

        wheels = sorted(dist_dir.glob("*.whl"), key=lambda p: p.stat().st_mtime)
        if not wheels:
            pytest.skip("No wheel found in dist/")
        return wheels[-1]

    def test_py_typed_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """py.typed marker must be included in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            py_typed_files = [n for n in names if n.endswith("py.typed")]
            assert py_typed_files, f"py.typed not found in wheel. Contents: {names}"

    def test_no_pycache_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """__pycache__ directories must not be in the wheel."""
        with zipfile.ZipFile(wheel_path) as zf:
            pycache_files = [n for n in zf.namelist() if "__pycache__" in n]
            assert not pycache_files, f"__pycache__ found in wheel: {pycache_files}"

    def test_all_source_modules_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """All source modules must be present in the wheel."""
        expected_modules = [
            "sorted_diff/__init__.py",
            "sorted_diff/api.py",
            "sorted_diff/comparator.py",
            "sorted_diff/display.py",
            "sorted_diff/errors.py",
            "sorted_diff/result.py",
            "sorted_diff/algorithm/__init__.py",
            "sorted_diff/algorithm/config.py",
            "sorted_diff/algorithm/serializer.py",
            "sorted_diff/algorithm/sorter.py",
            "sorted_diff/tree/__init__.py",
            "sorted_diff/tree/nodes.py",
            "sorted_diff/tree/parser.py",
            "sorted_diff/tree/tokenizer.py",
            "sorted_diff/integrations/__init__.py",
            "sorted_diff/integrations/_pytest_plugin.py",
        ]
        with zipfile.ZipFile(wheel_path) as zf:
            names = zf.namelist()
            for module in expected_modules:
                assert any(module in n for n in names), (
                    f"Module {module} not found in wheel"
                )

    def test_metadata_in_wheel(self, wheel_path: Path):  # type: ignore[no-untyped-def]
        """Wheel metadata must include correct package info."""
        with zipfile.ZipFile(wheel_path) as zf:
            metadata_files = [n for n in zf.namelist() if "METADATA" in n]
            assert metadata_files, "No METADATA found in wheel"
            metadata = zf.read(metadata_files[0]).decode()
            assert "sorted-diff" in metadata.lower() or "sorted_diff" in metadata.lower()
            assert "0.1.0" in metadata


class TestPytestPluginDiscovery:
    """Verify the pytest plugin is discoverable."""

    def test_entry_point_registered(self):  # type: ignore[no-untyped-def]
        """pytest11 entry point must be registered for sorted-diff."""
        from importlib.metadata import entry_points

        pytest11_eps = entry_points(group="pytest11")

        sd_eps = [ep for ep in pytest11_eps if "sorted_diff" in str(ep.value)]
        assert sd_eps, (
            f"No pytest11 entry point found for sorted-diff. "
            f"Available: {[ep.name for ep in pytest11_eps]}"
        )

    def test_fixture_available(self):  # type: ignore[no-untyped-def]
        """assert_eq_sorted fixture must be importable from plugin."""
        import importlib

        mod = importlib.import_module("sorted_diff.integrations._pytest_plugin")
        assert hasattr(mod, "assert_eq_sorted")
        assert callable(mod.assert_eq_sorted)

    def test_plugin_discovery_via_pytest(self):  # type: ignore[no-untyped-def]
        """pytest --fixtures should list assert_eq_sorted."""
        result = subprocess.run(
            [sys.executable, "-m", "pytest", "--fixtures", "-q"],
            capture_output=True,
            text=True,
            cwd=str(PROJECT_ROOT),
        )
        assert "assert_eq_sorted" in result.stdout, (
            f"Fixture not found in pytest fixtures list. stdout: {result.stdout[:500]}"
        )


class TestPackageMetadata:
    """Verify the package metadata and exports."""

    def test_version(self):  # type: ignore[no-untyped-def]
        """Package version must be 0.1.0."""
        import sorted_diff

        assert sorted_diff.__version__ == "0.1.0"

    def test_all_exports(self):  # type: ignore[no-untyped-def]
        """__all__ must include the documented public API."""
        import sorted_diff

        expected = {
            "Composite",
            "DelimiterKind",
            "Leaf",
            "Node",
            "NormalizeConfig",
            "NormalizedText",
            "ParseError",
            "SortedComparator",
            "SortedComparison",
            "SortedRepr",
            "UnbalancedDelimitersError",
            "UnsupportedTokenError",
            "compare",
            "is_equivalent",
            "normalize",
            "normalize_text",
            "parse",
            "sorted_repr",
            "try_normalize",
        }
        actual = set(sorted_diff.__all__)
        assert expected == actual, (
            f"Missing: {expected - actual}, Extra: {actual - expected}"
        )
