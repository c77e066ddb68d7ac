"""Shared pytest fixtures for labsite tests."""

import json
from pathlib import Path

import pytest

from labsite.models import MediaItem, NewsItem, Publication

PUBLICATION_DATA = [
    {
        "id": "p1",
        "title": "RISC-V Vector Units for Sparse Inference",
        "authors": ["A. Sharma", "R. Iyer"],
        "venue": "DAC",
        "year": 2024,
        "type": "conference",
        "tags": ["RISC-V", "AI"],
    },
    {
        "id": "p2",
        "title": "Low-Power Edge Training",
        "authors": ["P. Nair"],
        "venue": "IEEE TCAD",
        "year": 2024,
        "type": "journal",
        "tags": ["AI", "Edge Computing"],
    },
    {
        "id": "p3",
        "title": "Lattice Cryptography on FPGAs",
        "authors": ["S. Rao", "K. Menon", "J. Thomas", "M. Das"],
        "venue": "FPL",
        "year": 2023,
        "type": "conference",
        "tags": ["FPGA", "Cryptography"],
    },
    {
        "id": "p4",
        "title": "ReRAM Crossbar Mapping",
        "authors": ["R. Iyer"],
        "venue": "ICCAD",
        "year": 2023,
        "type": "conference",
        "tags": ["ReRAM"],
    },
    {
        "id": "p5",
        "title": "Hardening Open RISC-V Cores",
        "authors": ["J. Thomas"],
        "venue": "HOST Workshop",
        "year": 2022,
        "type": "workshop",
        "tags": ["RISC-V", "Security"],
    },
    {
        "id": "p6",
        "title": "Streaming DSP Accelerators",
        "authors": ["M. Das", "P. Nair"],
        "venue": "JSPS",
        "year": 2021,
        "type": "journal",
        "tags": ["Signal Processing"],
    },
    {
        "id": "p7",
        "title": "Compiling Neural Networks to Accelerators",
        "authors": ["K. Menon"],
        "venue": "arXiv",
        "year": 2021,
        "type": "preprint",
        "tags": ["AI", "Compilers"],
    },
    {
        "id": "p8",
        "title": "A Survey of In-Memory Computing",
        "authors": ["A. Sharma"],
        "venue": "ACM Computing Surveys",
        "year": 2020,
        "type": "journal",
        "tags": ["In-Memory Computing"],
    },
    {
        "id": "p9",
        "title": "Efficient Deep Learning Hardware",
        "authors": ["A. Sharma"],
        "venue": "PhD Thesis",
        "year": 2019,
        "type": "thesis",
        "tags": ["AI"],
    },
    {
        "id": "p10",
        "title": "Teaching Computer Architecture with RISC-V",
        "authors": ["R. Iyer", "S. Rao"],
        "venue": "WCAE",
        "year": 2019,
        "type": "workshop",
        "tags": ["RISC-V", "Education"],
    },
]

MEDIA_DATA = [
    {"id": "m1", "src": "/img/group.jpg", "alt": "Group", "caption": "Lab group", "category": "group", "date": "2024-03-15"},
    {"id": "m2", "src": "/img/dac.jpg", "alt": "DAC talk", "caption": "DAC talk", "category": "talk", "date": "2024-06-24", "event": "DAC 2024"},
    {"id": "m3", "src": "/img/chip.jpg", "alt": "Chip", "caption": "First silicon", "category": "lab"},
    {"id": "m4", "src": "/img/iccad.jpg", "alt": "ICCAD talk", "caption": "ICCAD talk", "category": "talk", "date": "2023-10-30"},
    {"id": "m5", "src": "/img/award.jpg", "alt": "Award", "caption": "Best paper", "category": "award", "date": "2023-09-05"},
    {"id": "m6", "src": "/img/workshop.jpg", "alt": "Workshop", "caption": "Workshop", "category": "event"},
    {"id": "m7", "src": "/img/keynote.jpg", "alt": "Keynote", "caption": "Keynote", "category": "talk", "date": "2022-08-18"},
    {"id": "m8", "src": "/img/booth.jpg", "alt": "Booth", "caption": "Demo booth", "category": "conference"},
]

NEWS_DATA = [
    {"id": "n1", "date": "2024-06-24", "title": "Paper at DAC", "description": "Accepted.", "type": "publication"},
    {"id": "n2", "date": "2023-01-10", "title": "PhD openings", "description": "Apply now.", "type": "announcement", "pinned": True},
    {"id": "n3", "date": "2023-09-05", "title": "Best paper", "description": "Award at FPL.", "type": "award", "link": "https://example.org/award"},
]


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep tests away from the user's config file and labsite env vars."""
    config_path = tmp_path / "config" / "ui_config.json"
    config_path.parent.mkdir()
    monkeypatch.setattr("labsite.config.ui_config.get_ui_config_path", lambda: config_path)
    for name in ("LABSITE_CONTENT_DIR", "LABSITE_THEME", "LABSITE_DEBOUNCE_MS", "COLORFGBG"):
        monkeypatch.delenv(name, raising=False)
    return config_path


@pytest.fixture
def sample_publications() -> list[Publication]:
    return [Publication.from_dict(data) for data in PUBLICATION_DATA]


@pytest.fixture
def sample_media() -> list[MediaItem]:
    return [MediaItem.from_dict(data) for data in MEDIA_DATA]


@pytest.fixture
def sample_news() -> list[NewsItem]:
    return [NewsItem.from_dict(data) for data in NEWS_DATA]


def write_content(directory: Path, publications=None, media=None, news=None) -> Path:
    """Write content files into ``directory`` and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    for filename, data in (
        ("publications.json", publications),
        ("media.json", media),
        ("news.json", news),
    ):
        if data is not None:
            (directory / filename).write_text(json.dumps(data))
    return directory


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """A content directory holding the sample collections."""
    return write_content(
        tmp_path / "content",
        publications=PUBLICATION_DATA,
        media=MEDIA_DATA,
        news=NEWS_DATA,
    )
