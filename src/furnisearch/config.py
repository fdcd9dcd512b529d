"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from furnisearch.index.search import MAX_RESULTS
from furnisearch.index.suggest import MAX_SUGGESTIONS


def _get_default_catalog_path() -> Path | None:
    """Prefer a local data/catalog.json; otherwise use the bundled catalog."""
    local_catalog = Path("data/catalog.json")
    if local_catalog.exists():
        return local_catalog
    return None


@dataclass(slots=True)
class AppConfig:
    catalog_path: Path | None = None
    max_results: int = MAX_RESULTS
    max_suggestions: int = MAX_SUGGESTIONS
    # Expose raw scores to renderers; off for production builds
    debug: bool = False

    def __post_init__(self) -> None:
        if self.catalog_path is None:
            self.catalog_path = _get_default_catalog_path()

    def resolve_catalog_path(self, base_dir: Path | None = None) -> Path | None:
        if self.catalog_path is None:
            return None
        if Path(self.catalog_path).is_absolute() or base_dir is None:
            return Path(self.catalog_path)
        return base_dir / self.catalog_path
