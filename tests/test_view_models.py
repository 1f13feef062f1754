"""Tests for the screen view models."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jetcaster_tv import routes
from jetcaster_tv.services.catalog import PodcastCatalog
from jetcaster_tv.services.models import Episode, Podcast
from jetcaster_tv.view_models import (
    DiscoverViewModel,
    LibraryViewModel,
    PodcastScreenViewModel,
    SearchViewModel,
)


def make_catalog():
    return PodcastCatalog(
        [
            Podcast("urn:a", "Cooking Daily", author="Chef", categories=["Food"]),
            Podcast("urn:b", "Space Hour", author="Astro", categories=["Science"]),
            Podcast("urn:c", "Kitchen Science", author="Lab", categories=["Food", "Science"]),
        ],
        [
            Episode("a1", "urn:a", "Bread"),
            Episode("b1", "urn:b", "Mars"),
            Episode("c1", "urn:c", "Emulsions"),
        ],
    )


def test_discover_category_selection():
    vm = DiscoverViewModel(make_catalog())
    assert vm.categories == ["Food", "Science"]
    assert vm.selected_category == "Food"
    assert [p.uri for p in vm.podcasts] == ["urn:a", "urn:c"]

    vm.select_category(1)
    assert vm.selected_category == "Science"
    assert [p.uri for p in vm.podcasts] == ["urn:b", "urn:c"]
    assert {e.uri for e in vm.latest_episodes(10)} == {"b1", "c1"}

    vm.select_category(7)  # out of range is ignored
    assert vm.selected_category == "Science"


def test_discover_without_categories_shows_everything():
    catalog = PodcastCatalog([Podcast("urn:x", "X")])
    vm = DiscoverViewModel(catalog)
    assert vm.selected_category is None
    assert [p.uri for p in vm.podcasts] == ["urn:x"]


def test_library():
    catalog = make_catalog()
    vm = LibraryViewModel(catalog)
    assert vm.is_empty
    catalog.set_subscribed("urn:b", True)
    assert not vm.is_empty
    assert [p.uri for p in vm.subscribed_podcasts] == ["urn:b"]


def test_search():
    vm = SearchViewModel(make_catalog())
    assert vm.results == []
    vm.set_query("SCIENCE")
    assert [p.uri for p in vm.results] == ["urn:c"]
    vm.set_query("astro")
    assert [p.uri for p in vm.results] == ["urn:b"]
    vm.set_query("  ")
    assert vm.results == []


def test_podcast_view_model_subscription():
    catalog = make_catalog()
    vm = PodcastScreenViewModel(catalog, "urn:a")
    assert vm.podcast.title == "Cooking Daily"
    assert [e.uri for e in vm.episodes] == ["a1"]
    assert not vm.is_subscribed
    vm.toggle_subscription()
    assert vm.is_subscribed
    assert catalog.find_podcast("urn:a").subscribed


def test_podcast_view_model_unknown_uri():
    vm = PodcastScreenViewModel(make_catalog(), "urn:missing")
    assert vm.podcast is None
    assert vm.episodes == []
    assert not vm.is_subscribed
    vm.toggle_subscription()  # no-op
    assert not vm.is_subscribed


def test_factory_builds_from_route():
    catalog = make_catalog()
    create = PodcastScreenViewModel.factory(catalog)
    vm = create(routes.Podcast("urn:b"))
    assert isinstance(vm, PodcastScreenViewModel)
    assert vm.podcast_uri == "urn:b"
    assert vm.catalog is catalog


def test_discover_resolves_episode_podcast():
    vm = DiscoverViewModel(make_catalog())
    assert vm.podcast_for(Episode("c1", "urn:c", "Emulsions")).title == "Kitchen Science"
    assert vm.podcast_for(Episode("x1", "urn:gone", "Lost")) is None
