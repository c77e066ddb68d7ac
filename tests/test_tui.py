"""Pilot-based tests for the publication and gallery views."""

from __future__ import annotations

from typing import Any

import pytest
from textual.app import App, ComposeResult
from textual.widgets import Input, OptionList, Select

from labsite.config.constants import DEFAULT_DEBOUNCE_MS
from labsite.content import ContentLoader
from labsite.services.filter_engine import ALL
from labsite.ui.app import LabsiteApp
from labsite.ui.gallery_view import GalleryView
from labsite.ui.lightbox_screen import LightboxScreen
from labsite.ui.publications_view import PublicationsView
from labsite.ui.themes import ThemePreference

# ---------------------------------------------------------------------------
# Test apps
# ---------------------------------------------------------------------------


class PublicationsTestApp(App[None]):
    def __init__(self, publications: list[Any]):
        super().__init__()
        self.publications = publications

    def compose(self) -> ComposeResult:
        yield PublicationsView(self.publications, id="publications-view")


class GalleryTestApp(App[None]):
    def __init__(self, media: list[Any]):
        super().__init__()
        self.media = media

    def compose(self) -> ComposeResult:
        yield GalleryView(self.media, id="gallery-view")


class MemoryThemeStore:
    def __init__(self, preference: ThemePreference = ThemePreference.SYSTEM):
        self.preference = preference
        self.saved: list[ThemePreference] = []

    def load(self) -> ThemePreference:
        return self.preference

    def save(self, preference: ThemePreference) -> None:
        self.preference = preference
        self.saved.append(preference)


# ---------------------------------------------------------------------------
# Tests: Publications
# ---------------------------------------------------------------------------


class TestPublicationsView:
    @pytest.mark.asyncio
    async def test_mounts_with_all_results(self, sample_publications) -> None:
        app = PublicationsTestApp(sample_publications)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.query_one("#pub-results", OptionList).option_count == 10
            assert app.query_one("#filter-year", Select).value == ALL

    @pytest.mark.asyncio
    async def test_typing_filters_results(self, sample_publications, monkeypatch) -> None:
        monkeypatch.setenv("LABSITE_DEBOUNCE_MS", "0")
        app = PublicationsTestApp(sample_publications)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            app.query_one("#pub-search-input", Input).focus()
            await pilot.press("i", "y", "e", "r")
            await pilot.pause()
            await pilot.pause()
            view = app.query_one(PublicationsView)
            assert view.presenter.state.query == "iyer"
            assert app.query_one("#pub-results", OptionList).option_count == 3

    @pytest.mark.asyncio
    async def test_invalid_debounce_setting_uses_default(
        self, sample_publications, monkeypatch
    ) -> None:
        monkeypatch.setenv("LABSITE_DEBOUNCE_MS", "fast")
        app = PublicationsTestApp(sample_publications)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            view = app.query_one(PublicationsView)
            assert view._debouncer.interval_ms == DEFAULT_DEBOUNCE_MS
            assert app.query_one("#pub-results", OptionList).option_count == 10

    @pytest.mark.asyncio
    async def test_year_select_filters_results(self, sample_publications) -> None:
        app = PublicationsTestApp(sample_publications)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            app.query_one("#filter-year", Select).value = "2021"
            await pilot.pause()
            await pilot.pause()
            view = app.query_one(PublicationsView)
            assert view.presenter.state.filtered_count == 2
            assert app.query_one("#pub-results", OptionList).option_count == 2

    @pytest.mark.asyncio
    async def test_clear_filters_resets_widgets(self, sample_publications) -> None:
        app = PublicationsTestApp(sample_publications)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            view = app.query_one(PublicationsView)
            await view.presenter.set_selection("type", "journal")
            app.query_one("#filter-type", Select).value = "journal"
            await pilot.pause()

            await view.action_clear_filters()
            await pilot.pause()
            assert view.presenter.state.filtered_count == 10
            assert app.query_one("#filter-type", Select).value == ALL
            assert app.query_one("#pub-search-input", Input).value == ""


# ---------------------------------------------------------------------------
# Tests: Gallery
# ---------------------------------------------------------------------------


class TestGalleryView:
    @pytest.mark.asyncio
    async def test_category_filter(self, sample_media) -> None:
        app = GalleryTestApp(sample_media)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.query_one("#gallery-categories", OptionList).option_count == 7
            view = app.query_one(GalleryView)
            await view.presenter.select_category("talk")
            await pilot.pause()
            assert app.query_one("#gallery-list", OptionList).option_count == 3

    @pytest.mark.asyncio
    async def test_lightbox_open_navigate_close(self, sample_media) -> None:
        app = GalleryTestApp(sample_media)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            view = app.query_one(GalleryView)
            gallery = app.query_one("#gallery-list", OptionList)
            gallery.focus()
            gallery.highlighted = 0
            await pilot.press("enter")
            await pilot.pause()
            await pilot.pause()

            assert isinstance(app.screen, LightboxScreen)
            assert view.scroll_lock.locked
            assert gallery.styles.overflow_y == "hidden"

            await pilot.press("right")
            await pilot.pause()
            assert view.presenter.current_item.id == "m2"

            await pilot.press("left", "left")
            await pilot.pause()
            assert view.presenter.current_item.id == "m8"

            await pilot.press("escape")
            await pilot.pause()
            assert not isinstance(app.screen, LightboxScreen)
            assert not view.presenter.lightbox.is_open
            assert not view.scroll_lock.locked
            assert gallery.styles.overflow_y != "hidden"

    @pytest.mark.asyncio
    async def test_clicking_overlay_closes_lightbox(self, sample_media) -> None:
        app = GalleryTestApp(sample_media)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            view = app.query_one(GalleryView)
            gallery = app.query_one("#gallery-list", OptionList)
            gallery.focus()
            gallery.highlighted = 2
            await pilot.press("enter")
            await pilot.pause()
            assert isinstance(app.screen, LightboxScreen)
            assert view.scroll_lock.locked

            await pilot.click(offset=(1, 1))
            await pilot.pause()
            await pilot.pause()
            assert not isinstance(app.screen, LightboxScreen)
            assert not view.presenter.lightbox.is_open
            assert not view.scroll_lock.locked
            assert gallery.styles.overflow_y != "hidden"


# ---------------------------------------------------------------------------
# Tests: App
# ---------------------------------------------------------------------------


class TestLabsiteApp:
    @pytest.mark.asyncio
    async def test_stored_preference_is_applied(self, content_dir) -> None:
        store = MemoryThemeStore(ThemePreference.LIGHT)
        app = LabsiteApp(loader=ContentLoader(content_dir), theme_store=store)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.theme == "labsite-light"
            assert app.query_one("#publications-view", PublicationsView)
            assert app.query_one("#gallery-view", GalleryView)

    @pytest.mark.asyncio
    async def test_cycle_theme_persists(self, content_dir) -> None:
        store = MemoryThemeStore(ThemePreference.DARK)
        app = LabsiteApp(loader=ContentLoader(content_dir), theme_store=store)
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert app.theme == "labsite-dark"

            # COLORFGBG is unset, so "system" resolves to dark
            app.action_cycle_theme()
            await pilot.pause()
            assert store.saved == [ThemePreference.SYSTEM]
            assert app.theme == "labsite-dark"

            app.action_cycle_theme()
            await pilot.pause()
            assert store.saved[-1] is ThemePreference.LIGHT
            assert app.theme == "labsite-light"
