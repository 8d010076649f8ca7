"""
Unit tests for package metadata.
"""

import sys

import table_text


class TestPackageMetadata:
    def test_version_when_dev_checkout_then_read_from_pyproject(self):
        assert table_text.__version__ == "0.1.0"

    def test_version_when_frozen_then_read_from_bundle_root(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text('[project]\nversion = "9.8.7"\n')
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "_MEIPASS", str(tmp_path), raising=False)

        assert table_text._get_version() == "9.8.7"

    def test_copyright_when_imported_then_names_license(self):
        assert "Polyform Noncommercial License" in table_text.__copyright__
