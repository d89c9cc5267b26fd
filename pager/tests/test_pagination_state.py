import logging

import pytest

from pager.exceptions import (
    ConfigError,
    MissingCurrentPage,
    MissingTotal,
    PageAboveRange,
    PageBelowRange,
)
from pager.services.pagination import DisplayMode, LinkKind, PaginationState


def kinds(links):
    return [link.kind for link in links]


def crumbs(links):
    return [link.page_number for link in links if link.is_crumb]


# ── валидация ────────────────────────────────────────────────────────────────

def test_validate_requires_current():
    state = PaginationState(current=None, total=10)
    with pytest.raises(MissingCurrentPage):
        state.validate()
    with pytest.raises(MissingCurrentPage):
        state.build_links()


def test_validate_requires_total():
    state = PaginationState(current=1)
    with pytest.raises(MissingTotal):
        state.validate()
    with pytest.raises(MissingTotal):
        state.build_links()


def test_non_positive_items_per_page_rejected(make_state):
    with pytest.raises(ConfigError):
        make_state(per=0)
    with pytest.raises(ConfigError):
        make_state().set_crumbs(0)


def test_unknown_option_rejected():
    with pytest.raises(TypeError):
        PaginationState(1, 10, colour="red")


# ── число страниц ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("total, per, expected", [
    (200, 10, 20),
    (201, 10, 21),
    (9, 10, 1),
    (0, 10, 0),
    (37, 10, 4),
])
def test_page_count(total, per, expected):
    assert PaginationState(1, total, per).page_count() == expected


# ── ссылки ──────────────────────────────────────────────────────────────────

def test_empty_listing_renders_nothing(make_state):
    assert make_state(1, 0).build_links() == []


def test_single_page_renders_nothing(make_state):
    assert make_state(1, 7).build_links() == []


def test_single_page_always_show(make_state):
    links = make_state(1, 7, always_show=True).build_links()
    assert kinds(links) == [LinkKind.FIRST, LinkKind.PREVIOUS, LinkKind.CURRENT, LinkKind.NEXT, LinkKind.LAST]
    assert [l.disabled for l in links if not l.is_crumb] == [True, True, True, True]


def test_empty_listing_always_show(make_state):
    links = make_state(1, 0).always_show_pagination().build_links()
    assert crumbs(links) == [1]
    assert links[-1].disabled and links[-2].disabled


def test_full_order_in_the_middle(make_state):
    links = make_state(10, 200).build_links()
    assert kinds(links) == [
        LinkKind.FIRST, LinkKind.PREVIOUS,
        LinkKind.PAGE_NUMBER, LinkKind.PAGE_NUMBER, LinkKind.CURRENT,
        LinkKind.PAGE_NUMBER, LinkKind.PAGE_NUMBER,
        LinkKind.NEXT, LinkKind.LAST,
    ]
    assert crumbs(links) == [8, 9, 10, 11, 12]
    assert not any(l.disabled for l in links)


def test_first_page_disables_first_and_previous(make_state):
    links = make_state(1, 200, target="/items/%d/").build_links()
    first, previous = links[0], links[1]
    assert first.disabled and first.href == "#"
    assert previous.disabled and previous.href == "#"
    assert previous.css_classes == ("copy", "previous", "disabled")
    assert links[-2].href == "/items/2/"
    assert links[-1].href == "/items/20/"
    assert crumbs(links) == [1, 2, 3, 4, 5]


def test_last_page_disables_next_and_last(make_state):
    links = make_state(20, 200, target="/items/%d/").build_links()
    nxt, last = links[-2], links[-1]
    assert nxt.disabled and nxt.href == "#"
    assert last.disabled and last.href == "#"
    assert last.css_classes == ("copy", "last", "disabled")
    assert links[0].href == "/items/1/"
    assert links[1].href == "/items/19/"
    assert crumbs(links) == [16, 17, 18, 19, 20]


def test_current_crumb_shape(make_state):
    current = [l for l in make_state(3, 200).build_links() if l.kind == LinkKind.CURRENT][0]
    assert current.href == "#"
    assert current.label == "3"
    assert current.css_classes == ("number", "active")


def test_page_below_range(make_state):
    with pytest.raises(PageBelowRange):
        make_state(0, 200).build_links()


def test_page_above_range(make_state):
    with pytest.raises(PageAboveRange) as exc:
        make_state(21, 200).build_links()
    assert exc.value.page == 21
    assert exc.value.page_count == 20


def test_range_error_is_logged(make_state, caplog):
    with caplog.at_level(logging.WARNING, logger="pager"):
        with pytest.raises(PageAboveRange):
            make_state(99, 200).build_links()
    assert "above range" in caplog.text


def test_clean_mode_has_no_crumbs(make_state):
    state = make_state(10, 200).set_clean()
    assert state.display_mode == DisplayMode.CLEAN
    assert DisplayMode.CLEAN.label == "Clean (previous/next only)"
    assert kinds(state.build_links()) == [LinkKind.FIRST, LinkKind.PREVIOUS, LinkKind.NEXT, LinkKind.LAST]
    assert crumbs(state.set_full().build_links()) == [8, 9, 10, 11, 12]


def test_default_and_custom_labels(make_state):
    links = make_state(10, 200).set_next("Вперёд").build_links()
    labels = {l.kind: l.label for l in links if not l.is_crumb}
    assert labels == {
        LinkKind.FIRST: "« First",
        LinkKind.PREVIOUS: "« Previous",
        LinkKind.NEXT: "Вперёд",
        LinkKind.LAST: "Last »»",
    }


def test_classes(make_state):
    state = make_state()
    assert state.classes == ("clearfix", "pagination")
    state.add_classes(["pagination-centered", "pagination"])
    assert state.classes == ("clearfix", "pagination", "pagination-centered")
    assert state.set_classes("pager").classes == ("pager",)


def test_crumbs_option(make_state):
    assert crumbs(make_state(10, 200, crumbs=3).build_links()) == [9, 10, 11]
    assert crumbs(make_state(10, 200, max_crumbs=7).build_links()) == [7, 8, 9, 10, 11, 12, 13]


# ── кэш производных значений ────────────────────────────────────────────────

def test_setters_are_fluent(make_state):
    state = make_state()
    assert state.set_current(2).set_total(50).set_items_per_page(5).set_crumbs(3) is state


def test_mutation_invalidates_cached_window(make_state):
    state = make_state(1, 200)
    assert state.compute_crumb_window().leading == 0
    state.set_current(10)
    assert state.compute_crumb_window().leading == 2
    state.set_crumbs(3)
    assert state.compute_crumb_window().max_crumbs == 3


def test_mutation_invalidates_cached_page_count(make_state):
    state = make_state(1, 200)
    assert state.page_count() == 20
    state.set_total(50)
    assert state.page_count() == 5
    state.set_items_per_page(25)
    assert state.page_count() == 2


def test_mutation_invalidates_cached_urls(make_state):
    state = make_state(1, 200, target="/a/%d/")
    assert state.render_url(2) == "/a/2/"
    state.set_target("/b/%d/")
    assert state.render_url(2) == "/b/2/"


# ── настройки PAGER ─────────────────────────────────────────────────────────

def test_defaults_come_from_settings(settings):
    settings.PAGER = {"CRUMBS": 3, "ITEMS_PER_PAGE": 25, "LABELS": {"next": "Дальше"}}
    state = PaginationState(1, 100)
    assert state.crumbs == 3
    assert state.items_per_page == 25
    assert state.labels["next"] == "Дальше"
    assert state.labels["previous"] == "« Previous"


def test_unknown_setting_is_logged(settings, caplog):
    settings.PAGER = {"CRUMBZ": 3}
    with caplog.at_level(logging.WARNING, logger="pager"):
        assert PaginationState(1, 100).crumbs == 5
    assert "CRUMBZ" in caplog.text


# ── SEO ─────────────────────────────────────────────────────────────────────

def test_canonical_url_first_page(make_state):
    assert make_state(1, 200).canonical_url("/search", "example.com") == "http://example.com/search"


def test_canonical_url_other_page(make_state):
    assert make_state(3, 200).canonical_url("/search", "example.com") == "http://example.com/search?page=3"
    assert (make_state(3, 200, key="p").canonical_url("/search", "https://example.com")
            == "https://example.com/search?p=3")


def test_canonical_url_uses_target(make_state):
    assert make_state(3, 200, target="/list").canonical_url("/ignored", "example.com") == "http://example.com/list?page=3"
    assert (make_state(3, 200, target="/items/%d/").canonical_url("/ignored", "example.com", scheme="https")
            == "https://example.com/items/3/")


def test_page_url(make_state):
    state = make_state(3, 200)
    assert state.page_url(4, "/search", "example.com") == "http://example.com/search?page=4"
    assert state.page_url(request_path="/search", host="example.com") == "http://example.com/search?page=3"
    assert state.page_param() == "?page=3"


def test_page_url_requires_current():
    with pytest.raises(MissingCurrentPage):
        PaginationState(current=None, total=200).page_url(request_path="/search", host="example.com")
    # явный номер страницы: current не нужен
    assert (PaginationState(current=None, total=200).page_url(2, "/search", "example.com")
            == "http://example.com/search?page=2")


def test_canonical_url_target_with_escapes(make_state):
    assert (make_state(2, 200, target="/sale%%/").canonical_url("/ignored", "example.com")
            == "http://example.com/sale%/?page=2")
    assert (make_state(2, 200, target="/new%20docs/%d/").canonical_url("/ignored", "example.com")
            == "http://example.com/new%20docs/2/")


def test_rel_links_single_page(make_state):
    assert make_state(1, 5).rel_prev_next_links() == []


def test_rel_links_first_page(make_state):
    assert make_state(1, 200, target="/p/%d").rel_prev_next_links() == ["/p/2"]


def test_rel_links_middle_and_last(make_state):
    assert make_state(5, 200, target="/p/%d").rel_links() == [("prev", "/p/4"), ("next", "/p/6")]
    assert make_state(20, 200, target="/p/%d").rel_links() == [("prev", "/p/19")]
