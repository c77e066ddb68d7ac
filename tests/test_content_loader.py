"""Tests for loading content files."""

import logging

import pytest

from conftest import MEDIA_DATA, PUBLICATION_DATA, write_content
from labsite.content import ContentLoader
from labsite.exceptions import ContentError, ContentNotFoundError, ContentParseError


class TestContentLoader:
    def test_loads_all_collections(self, content_dir):
        loader = ContentLoader(content_dir)
        assert len(loader.load_publications()) == 10
        assert len(loader.load_media()) == 8
        assert len(loader.load_news()) == 3

    def test_bundled_content_loads(self):
        loader = ContentLoader()
        assert loader.load_publications()
        assert loader.load_media()
        assert loader.load_news()

    def test_results_are_cached(self, content_dir):
        loader = ContentLoader(content_dir)
        first = loader.load_publications()
        (content_dir / "publications.json").write_text("[]")
        assert loader.load_publications() is first

        loader.clear_cache()
        assert loader.load_publications() == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContentNotFoundError) as exc_info:
            ContentLoader(tmp_path).load_media()
        assert exc_info.value.context["path"].endswith("media.json")

    def test_invalid_json(self, tmp_path):
        (tmp_path / "news.json").write_text("[{")
        with pytest.raises(ContentParseError):
            ContentLoader(tmp_path).load_news()

    def test_non_array(self, tmp_path):
        (tmp_path / "news.json").write_text('{"id": "n1"}')
        with pytest.raises(ContentError, match="Expected a JSON array"):
            ContentLoader(tmp_path).load_news()

    def test_malformed_entries_are_skipped(self, tmp_path, caplog):
        entries = [
            PUBLICATION_DATA[0],
            {"id": "bad-year", "title": "x", "year": "soon", "type": "journal"},
            "not an object",
            {**PUBLICATION_DATA[1], "type": "blog"},
            PUBLICATION_DATA[2],
        ]
        write_content(tmp_path, publications=entries)

        with caplog.at_level(logging.WARNING, logger="labsite"):
            pubs = ContentLoader(tmp_path).load_publications()

        assert [p.id for p in pubs] == ["p1", "p3"]
        assert len([r for r in caplog.records if r.levelno == logging.WARNING]) == 3

    def test_environment_content_dir(self, tmp_path, monkeypatch):
        write_content(tmp_path, media=MEDIA_DATA[:2])
        monkeypatch.setenv("LABSITE_CONTENT_DIR", str(tmp_path))
        assert [m.id for m in ContentLoader().load_media()] == ["m1", "m2"]

    def test_wrongly_typed_fields_are_skipped(self, tmp_path):
        entries = [
            PUBLICATION_DATA[0],
            {**PUBLICATION_DATA[1], "links": "http://x"},
            {**PUBLICATION_DATA[2], "tags": 5},
            {**PUBLICATION_DATA[3], "authors": {"name": "A. Sharma"}},
        ]
        write_content(tmp_path, publications=entries)
        assert [p.id for p in ContentLoader(tmp_path).load_publications()] == ["p1"]

    def test_non_utf8_file(self, tmp_path):
        (tmp_path / "publications.json").write_bytes(b'[{"title": "\xff\xfe"}]')
        with pytest.raises(ContentParseError, match="UTF-8") as exc_info:
            ContentLoader(tmp_path).load_publications()
        assert exc_info.value.context["path"].endswith("publications.json")
