"""Catalog loading tests.

Tests PathCatalogLoader path handling and security, JSON decoding into
message trees, CatalogLoadResult/LoadSummary bookkeeping, and load_catalog().
"""

import json
import logging
from pathlib import Path

import pytest

from keyglot import MessageResolver
from keyglot.diagnostics import CatalogFormatError, DiagnosticCode
from keyglot.enums import LoadStatus
from keyglot.localization import (
    CatalogLoader,
    CatalogLoadResult,
    LoadSummary,
    PathCatalogLoader,
    load_catalog,
    parse_catalog_source,
)
from keyglot.runtime.tree import lookup


def _write_catalog(directory: Path, locale: str, content: object) -> Path:
    path = directory / f"{locale}.json"
    path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
    return path


class DictLoader(CatalogLoader):
    """In-memory loader for tests."""

    def __init__(self, sources: dict[str, str]) -> None:
        self.sources = sources

    def load(self, locale: str) -> str:
        if locale not in self.sources:
            raise FileNotFoundError(locale)
        return self.sources[locale]


class TestPathCatalogLoader:
    """Test the filesystem loader."""

    def test_requires_locale_placeholder(self, tmp_path: Path) -> None:
        """base_path without {locale} is rejected."""
        with pytest.raises(ValueError, match="placeholder"):
            PathCatalogLoader(str(tmp_path / "messages.json"))

    def test_loads_file(self, tmp_path: Path) -> None:
        """load() returns the file text."""
        _write_catalog(tmp_path, "pt-BR", {"a": "Ação"})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        assert json.loads(loader.load("pt-BR")) == {"a": "Ação"}

    def test_describe_path(self, tmp_path: Path) -> None:
        """describe_path() substitutes the locale."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        assert loader.describe_path("en") == str(tmp_path / "en.json")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Missing files raise FileNotFoundError."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(FileNotFoundError):
            loader.load("de")

    @pytest.mark.parametrize("locale", ["", "..", "../etc", "a/b", "a\\b"])
    def test_rejects_unsafe_locale(self, tmp_path: Path, locale: str) -> None:
        """Empty codes, traversal and separators are rejected."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        with pytest.raises(ValueError):
            loader.load(locale)

    def test_rejects_path_outside_root(self, tmp_path: Path) -> None:
        """Resolved paths must stay inside root_dir."""
        inner = tmp_path / "inner"
        inner.mkdir()
        _write_catalog(tmp_path, "pt", {"a": "A"})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"), root_dir=str(inner))
        with pytest.raises(ValueError, match="traversal"):
            loader.load("pt")

    def test_size_limit(self, tmp_path: Path) -> None:
        """Files above max_source_size raise CatalogFormatError."""
        _write_catalog(tmp_path, "pt", {"a": "x" * 100})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"), max_source_size=10)
        with pytest.raises(CatalogFormatError) as exc_info:
            loader.load("pt")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CATALOG_TOO_LARGE

    def test_size_limit_disabled(self, tmp_path: Path) -> None:
        """max_source_size=0 disables the check."""
        _write_catalog(tmp_path, "pt", {"a": "x" * 100})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"), max_source_size=0)
        assert loader.load("pt")


class TestParseCatalogSource:
    """Test JSON decoding."""

    def test_nested_object(self) -> None:
        """Nested objects become a tree."""
        tree = parse_catalog_source(
            '{"ui": {"salvar": "Salvar"}}', locale="pt", source_path="pt.json"
        )
        assert lookup(tree, "ui.salvar") == "Salvar"

    def test_top_level_must_be_object(self) -> None:
        """Arrays and scalars are rejected."""
        with pytest.raises(CatalogFormatError) as exc_info:
            parse_catalog_source("[1, 2]", locale="pt", source_path="pt.json")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CATALOG_NOT_OBJECT
        assert "pt.json" in str(exc_info.value)

    def test_invalid_json(self) -> None:
        """Malformed JSON raises ValueError."""
        with pytest.raises(ValueError):
            parse_catalog_source("{oops", locale="pt", source_path="pt.json")


class TestLoadSummary:
    """Test aggregate statistics."""

    def test_counts(self) -> None:
        """Counts are derived from results."""
        summary = LoadSummary((
            CatalogLoadResult("pt", LoadStatus.SUCCESS, message_count=3),
            CatalogLoadResult("en", LoadStatus.NOT_FOUND),
            CatalogLoadResult("es", LoadStatus.ERROR, error=ValueError("bad")),
        ))
        assert summary.total_attempted == 3
        assert (summary.successful, summary.not_found, summary.errors) == (1, 1, 1)
        assert summary.has_errors
        assert not summary.all_successful
        assert [r.locale for r in summary.get_errors()] == ["es"]
        assert [r.locale for r in summary.get_not_found()] == ["en"]
        assert summary.get_by_locale("pt") is not None
        assert summary.get_by_locale("fr") is None
        assert repr(summary) == "LoadSummary(total=3, ok=1, not_found=1, errors=1)"

    def test_empty(self) -> None:
        """No attempts counts as all successful."""
        summary = LoadSummary(())
        assert summary.all_successful
        assert not summary.has_errors


class TestLoadCatalog:
    """Test eager loading end to end."""

    def test_loads_every_locale(self, tmp_path: Path) -> None:
        """Each found file becomes a bundle."""
        _write_catalog(tmp_path, "pt-BR", {"ui": {"salvar": "Salvar", "n": "{{n}} itens"}})
        _write_catalog(tmp_path, "en", {"ui": {"salvar": "Save"}})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))

        catalog, summary = load_catalog(["pt-BR", "en"], loader)

        assert catalog.locales == ("pt-BR", "en")
        assert summary.all_successful
        result = summary.get_by_locale("pt-BR")
        assert result is not None
        assert result.message_count == 2
        assert result.source_path == str(tmp_path / "pt-BR.json")

        resolver = MessageResolver(catalog)
        assert resolver.resolve("ui.n", {"n": 4}) == "4 itens"

    def test_missing_locale_recorded(self, tmp_path: Path) -> None:
        """Missing files are NOT_FOUND and absent from the catalog."""
        _write_catalog(tmp_path, "pt-BR", {"a": "A"})
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        catalog, summary = load_catalog(["pt-BR", "de"], loader)
        assert catalog.locales == ("pt-BR",)
        assert summary.not_found == 1
        assert not summary.has_errors

    def test_errors_recorded_not_raised(self, tmp_path: Path) -> None:
        """Invalid JSON and non-object documents are ERROR results."""
        (tmp_path / "pt.json").write_text("{not json", encoding="utf-8")
        _write_catalog(tmp_path, "en", ["list"])
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        catalog, summary = load_catalog(["pt", "en"], loader)
        assert len(catalog) == 0
        assert summary.errors == 2
        en = summary.get_by_locale("en")
        assert en is not None
        assert isinstance(en.error, CatalogFormatError)

    def test_traversal_recorded_as_error(self, tmp_path: Path) -> None:
        """Unsafe locale codes never raise out of load_catalog()."""
        loader = PathCatalogLoader(str(tmp_path / "{locale}.json"))
        _, summary = load_catalog(["../x"], loader)
        assert summary.errors == 1

    def test_deep_nesting_recorded_as_error(self) -> None:
        """JSON nested past the recursion limit is an ERROR result."""
        loader = DictLoader({"pt-BR": "[" * 100_000 + "]" * 100_000})
        catalog, summary = load_catalog(["pt-BR"], loader)
        assert len(catalog) == 0
        assert summary.errors == 1
        result = summary.get_by_locale("pt-BR")
        assert result is not None
        assert isinstance(result.error, RecursionError)

    def test_duplicates_loaded_once(self) -> None:
        """Repeated locale codes produce one result."""
        loader = DictLoader({"pt": '{"a": "A"}'})
        _, summary = load_catalog(["pt", "pt"], loader)
        assert summary.total_attempted == 1

    def test_custom_loader(self) -> None:
        """Any CatalogLoader works, with the default describe_path()."""
        loader = DictLoader({"pt": '{"a": {"b": "B"}}'})
        catalog, summary = load_catalog(["pt"], loader)
        assert MessageResolver(catalog, default_locale="pt").resolve("a.b") == "B"
        result = summary.get_by_locale("pt")
        assert result is not None
        assert result.source_path == "pt.json"

    def test_logging(self, caplog: pytest.LogCaptureFixture) -> None:
        """Failures are logged; the summary is logged at INFO."""
        loader = DictLoader({"pt": "[]"})
        with caplog.at_level(logging.INFO, logger="keyglot.localization.loading"):
            load_catalog(["pt", "en"], loader)
        levels = {record.levelname for record in caplog.records}
        assert {"INFO", "WARNING", "ERROR"} <= levels
        assert "LoadSummary(total=2" in caplog.text
