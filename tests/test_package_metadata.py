# Area: Package Tests
"""Tests for the package metadata and licence header."""

import tx_battle

PROJECT_HOLDER = "The Bitcoin TX Battle authors"


class TestPackageMetadata:
    """Tests for the module-level metadata."""

    def test_author_is_project_holder(self):
        assert tx_battle.__author__ == PROJECT_HOLDER

    def test_license_is_mit(self):
        assert tx_battle.__license__.startswith("MIT")
        assert PROJECT_HOLDER in tx_battle.__license__

    def test_header_names_holder_and_licence(self):
        assert f"Copyright (c) 2026 {PROJECT_HOLDER}." in tx_battle.__doc__
        assert "MIT License" in tx_battle.__doc__
        assert "Proprietary" not in tx_battle.__doc__
