"""Tests for application configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from furnisearch.config import AppConfig


class TestAppConfig:
    """Test AppConfig dataclass."""

    def test_default_config(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Should use the bundled catalog when no local catalog exists."""
        monkeypatch.chdir(tmp_path)
        config = AppConfig()

        assert config.catalog_path is None
        assert config.max_results == 50
        assert config.max_suggestions == 5
        assert config.debug is False

    def test_local_catalog_preferred(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A data/catalog.json in the working directory is picked up."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "data").mkdir()
        (tmp_path / "data" / "catalog.json").write_text("[]", encoding="utf-8")

        assert AppConfig().catalog_path == Path("data/catalog.json")

    def test_custom_config(self) -> None:
        """Should create config with custom values."""
        config = AppConfig(
            catalog_path=Path("/custom/catalog.json"),
            max_results=10,
            max_suggestions=3,
            debug=True,
        )

        assert config.catalog_path == Path("/custom/catalog.json")
        assert config.max_results == 10
        assert config.max_suggestions == 3
        assert config.debug is True

    def test_resolve_absolute(self) -> None:
        """Should return absolute path as-is."""
        config = AppConfig(catalog_path=Path("/absolute/catalog.json"))

        assert config.resolve_catalog_path(Path("/base")) == Path("/absolute/catalog.json")

    def test_resolve_relative_with_base(self) -> None:
        """Should resolve relative path against base_dir."""
        config = AppConfig(catalog_path=Path("relative/catalog.json"))

        assert config.resolve_catalog_path(base_dir=Path("/base")) == Path("/base/relative/catalog.json")

    def test_resolve_relative_no_base(self) -> None:
        config = AppConfig(catalog_path=Path("relative/catalog.json"))

        assert config.resolve_catalog_path() == Path("relative/catalog.json")

    def test_resolve_bundled(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """The bundled catalog has no path to resolve."""
        monkeypatch.chdir(tmp_path)

        assert AppConfig().resolve_catalog_path(tmp_path) is None
