"""
Tests for selector probing
"""

import pytest

from findadoc_core.dom_selectors import (
    NEXT_PAGE,
    ROLE_SELECTORS,
    SPECIALTY_INPUT,
    SUBMIT_BUTTON,
    ZIP_INPUT,
    find_first,
    find_role,
)


@pytest.mark.asyncio
class TestFindFirst:

    async def test_returns_first_match_without_trying_later(self, page_factory, element_factory):
        b = element_factory()
        page = page_factory(elements={"B": b, "C": element_factory()})

        found = await find_first(page, ["A", "B", "C"])

        assert found is b
        assert page.queried == ["A", "B"]

    async def test_none_when_nothing_matches(self, page_factory):
        page = page_factory()
        assert await find_first(page, ["A", "B", "C"]) is None
        assert page.queried == ["A", "B", "C"]

    async def test_selector_error_is_a_miss(self, page_factory, element_factory):
        c = element_factory()
        page = page_factory(elements={"A": ValueError("malformed selector"), "C": c})

        assert await find_first(page, ["A", "B", "C"]) is c

    async def test_empty_candidates(self, page_factory):
        assert await find_first(page_factory(), []) is None


def test_every_role_has_candidates():
    for role in (SPECIALTY_INPUT, ZIP_INPUT, SUBMIT_BUTTON, NEXT_PAGE):
        assert ROLE_SELECTORS[role]


@pytest.mark.asyncio
class TestRoles:

    async def test_find_role_uses_table(self, page_factory, element_factory):
        zip_field = element_factory()
        page = page_factory(elements={ROLE_SELECTORS[ZIP_INPUT][-1]: zip_field})
        assert await find_role(page, ZIP_INPUT) is zip_field

    async def test_find_role_custom_table(self, page_factory, element_factory):
        el = element_factory()
        page = page_factory(elements={"#mine": el})
        assert await find_role(page, "anything", {"anything": ["#mine"]}) is el

    async def test_unknown_role(self, page_factory):
        assert await find_role(page_factory(), "nope") is None
