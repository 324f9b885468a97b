"""
Unit Tests for catalog filtering
"""
import pytest

from underground_service.domain.filters import (
    ALL_CATEGORIES,
    filter_catalog,
    filter_items,
    matches_category,
    matches_search,
)
from underground_service.domain.models import CatalogKind, Item
from underground_service.infrastructure.catalogs import EVENTS, MARKETPLACE_ITEMS, POSTS


def make_event(id, category, title="Event", tags=()):
    return Item(
        id=id,
        kind=CatalogKind.EVENTS,
        category=category,
        title=title,
        description="",
        author="Organizer",
        tags=tuple(tags),
    )


class TestFilterItems:
    """Test the generic predicate filter"""

    def test_keeps_order(self):
        """Test matching items keep their original order"""
        assert filter_items([5, 2, 8, 1, 9], lambda n: n > 3) == [5, 8, 9]

    def test_empty_input(self):
        """Test empty input gives empty output"""
        assert filter_items([], lambda n: True) == []


class TestMatchesCategory:
    """Test category predicate"""

    def test_all_accepts_everything(self):
        """Test "All" matches any category"""
        assert all(matches_category(item, ALL_CATEGORIES) for item in EVENTS)

    def test_exact_match(self):
        """Test category must match exactly"""
        item = make_event(1, "Tech")
        assert matches_category(item, "Tech")
        assert not matches_category(item, "tech")
        assert not matches_category(item, "Tech ")


class TestMatchesSearch:
    """Test free-text search predicate"""

    @pytest.mark.parametrize("term", ["", " ", "\t\n  "])
    def test_blank_term_accepts_everything(self, term):
        """Test empty or whitespace-only term matches"""
        assert matches_search(make_event(1, "Tech"), term)

    def test_case_insensitive(self):
        """Test search ignores case"""
        item = make_event(1, "Tech", title="HackGMU 2025")
        assert matches_search(item, "hackgmu")
        assert matches_search(item, "HACK")

    def test_matches_tags(self):
        """Test tags are searched"""
        item = make_event(1, "Tech", tags=("hackathon",))
        assert matches_search(item, "athon")

    def test_matches_author(self):
        """Test organizer is searched"""
        assert matches_search(make_event(1, "Tech"), "organizer")

    def test_term_is_not_stripped(self):
        """Test surrounding spaces are part of the search term"""
        item = make_event(1, "Tech", title="Career Fair")
        assert matches_search(item, "career fair")
        assert matches_search(item, " fair")
        assert not matches_search(item, "fair ")

    def test_no_match(self):
        """Test unrelated term does not match"""
        assert not matches_search(make_event(1, "Tech", title="Workshop"), "zzz")


class TestFilterCatalog:
    """Test combined category and search filtering"""

    def test_category_keeps_order(self):
        """Test category filter returns matching events in order"""
        items = [make_event(1, "Career"), make_event(2, "Tech"), make_event(3, "Tech")]

        result = filter_catalog(items, "Tech", "")

        assert [item.id for item in result] == [2, 3]

    def test_all_with_search(self):
        """Test "All" plus a search term finds only HackGMU"""
        items = [
            make_event(1, "Career", title="Fall Career Fair"),
            make_event(2, "Tech", title="HackGMU 2025"),
            make_event(3, "Tech", title="Intro to Cloud"),
        ]

        result = filter_catalog(items, ALL_CATEGORIES, "hack")

        assert [item.title for item in result] == ["HackGMU 2025"]

    @pytest.mark.parametrize("catalog", [POSTS, EVENTS, MARKETPLACE_ITEMS])
    @pytest.mark.parametrize("category,term", [
        ("All", ""),
        ("All", "study"),
        ("Tech", ""),
        ("Electronics", "apple"),
        ("Academic", "cs"),
        ("Nope", ""),
    ])
    def test_subset_and_complete(self, catalog, category, term):
        """Test result is exactly the ordered subset satisfying both predicates"""
        result = filter_catalog(catalog, category, term)

        expected = [
            item for item in catalog
            if matches_category(item, category) and matches_search(item, term)
        ]
        assert result == expected

    @pytest.mark.parametrize("category,term", [("All", "a"), ("Tech", "hack"), ("Sports", "")])
    def test_idempotent(self, category, term):
        """Test filtering twice gives the same result"""
        once = filter_catalog(EVENTS, category, term)
        assert filter_catalog(once, category, term) == once

    def test_unknown_category_is_empty(self):
        """Test category that no item has yields nothing"""
        assert filter_catalog(EVENTS, "Basket Weaving", "") == []
