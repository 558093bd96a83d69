"""
Unit tests for the windowed paginator.
"""

import pytest
from django.utils.html import escapejs

from rail_paginator.core.scope import PageScope
from rail_paginator.exceptions import PaginatorTemplateError
from rail_paginator.helpers.paginator import PageProxy, Paginator, paginate
from rail_paginator.helpers.tags import GapTag, PageTag, partial_template_names
from rail_paginator.testing import build_request, override_paginator_settings

pytestmark = pytest.mark.unit


def _layout(paginator):
    return [
        tag.page.number if isinstance(tag, PageTag) else "gap"
        for tag in paginator.page_tags()
    ]


def _paginator(current_page, total_pages, **options):
    return Paginator(
        build_request("/users/"),
        current_page=current_page,
        total_pages=total_pages,
        **options,
    )


class TestPageWindow:
    def test_inner_window_only(self):
        assert _layout(_paginator(10, 20)) == ["gap", 6, 7, 8, 9, 10, 11, 12, 13, 14, "gap"]

    def test_outer_window(self):
        layout = _layout(_paginator(10, 20, outer_window=1))
        assert layout == [1, "gap", 6, 7, 8, 9, 10, 11, 12, 13, 14, "gap", 20]

    def test_single_page_gap_is_shown_as_page(self):
        layout = _layout(_paginator(7, 20, outer_window=1))
        assert layout == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, "gap", 20]

    def test_small_collection_shows_every_page(self):
        assert _layout(_paginator(2, 3)) == [1, 2, 3]

    def test_left_and_right_override_outer_window(self):
        layout = _layout(_paginator(10, 20, window=1, left=2, right=3, outer_window=1))
        assert layout == [1, 2, "gap", 9, 10, 11, "gap", 18, 19, 20]

    def test_inner_window_alias(self):
        assert _layout(_paginator(10, 20, inner_window=1)) == ["gap", 9, 10, 11, "gap"]

    def test_window_from_settings(self):
        with override_paginator_settings(window=2, outer_window=1):
            layout = _layout(_paginator(10, 20))
        assert layout == [1, "gap", 8, 9, 10, 11, 12, "gap", 20]

    def test_out_of_range_current_page(self):
        assert _layout(_paginator(20, 2)) == ["gap"]

    def test_unknown_options_are_rejected(self):
        with pytest.raises(TypeError):
            _paginator(1, 3, remote=True)


class TestPageProxy:
    def test_rel_for_neighbours(self):
        paginator = _paginator(5, 10)

        assert PageProxy(paginator, 4).rel == "prev"
        assert PageProxy(paginator, 6).rel == "next"
        assert PageProxy(paginator, 5).rel is None
        assert PageProxy(paginator, 5).is_current

    def test_first_and_last(self):
        paginator = _paginator(5, 10)

        assert PageProxy(paginator, 1).is_first
        assert PageProxy(paginator, 10).is_last
        assert PageProxy(paginator, 11).is_out_of_range

    def test_was_truncated_after_gap(self):
        paginator = _paginator(5, 10)
        assert PageProxy(paginator, 3, last=GapTag(paginator)).was_truncated
        assert not PageProxy(paginator, 3).was_truncated

    def test_compares_with_numbers(self):
        paginator = _paginator(5, 10)
        assert PageProxy(paginator, 3) == 3
        assert str(PageProxy(paginator, 3)) == "3"


class TestPaginate:
    def test_returns_a_string(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 1))

        assert isinstance(html, str)
        assert '<nav class="pagination"' in html

    def test_escaping_for_javascript(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 1))
        assert escapejs(html)

    def test_current_page_is_not_a_link(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 1))

        assert '<span class="page current">1</span>' in html
        assert '<a href="/users/?page=2" rel="next">2</a>' in html

    def test_single_page_renders_nothing(self):
        assert paginate(build_request("/users/"), PageScope(list(range(10)), 1)) == ""

    def test_total_pages_option(self):
        html = paginate(
            build_request("/users/"), PageScope(list(range(50)), 1), total_pages=3
        )
        assert '<a href="/users/?page=3">Last &raquo;</a>' in html

    def test_first_page_hides_first_and_prev(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 1))

        assert "First" not in html
        assert "Prev" not in html
        assert "Next &rsaquo;" in html

    def test_last_page_hides_next_and_last(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 2))

        assert '<a href="/users/">&laquo; First</a>' in html
        assert '<a href="/users/" rel="prev">&lsaquo; Prev</a>' in html
        assert "Next" not in html
        assert "Last" not in html

    def test_out_of_range_page(self):
        html = paginate(build_request("/users/"), PageScope(list(range(50)), 20))

        assert "Last" not in html
        assert "Next" not in html

    def test_gap_marker(self):
        html = paginate(build_request("/users/"), PageScope(list(range(500)), 1, 10))
        assert '<span class="page gap">&hellip;</span>' in html

    def test_url_options_reach_links(self):
        html = paginate(
            build_request("/addresses/new/"),
            PageScope(list(range(50)), 1),
            url_name="users-index",
        )
        assert "/users/?page=2" in html

    def test_paginator_class_option(self):
        class CustomPaginator(Paginator):
            def render(self):
                return "CUSTOM PAGINATION"

        html = paginate(
            build_request("/users/"),
            PageScope(list(range(50)), 1),
            paginator_class=CustomPaginator,
        )
        assert html == "CUSTOM PAGINATION"

    def test_theme_option(self):
        html = paginate(
            build_request("/users/"), PageScope(list(range(50)), 1), theme="bootstrap"
        )

        assert '<ul class="pagination">' in html
        assert 'class="page-link"' in html

    def test_theme_falls_back_to_default_partials(self):
        html = paginate(
            build_request("/users/"), PageScope(list(range(50)), 1), theme="compact"
        )

        assert '<i class="compact-page">2</i>' in html
        assert '<nav class="pagination"' in html

    def test_views_prefix_option(self):
        html = paginate(
            build_request("/users/"),
            PageScope(list(range(50)), 1),
            views_prefix="alternative/",
        )
        assert html == "<b>1</b>\n"

    def test_missing_partial_raises(self):
        paginator = _paginator(1, 3)
        with pytest.raises(PaginatorTemplateError) as exc_info:
            paginator.get_template("nothing")
        assert "rail_paginator/default/_nothing.html" in exc_info.value.template_names


class TestPartialTemplateNames:
    def test_default_theme(self):
        assert partial_template_names("page") == ["rail_paginator/default/_page.html"]

    def test_theme_and_prefix(self):
        assert partial_template_names("page", "bootstrap", "admin/") == [
            "admin/rail_paginator/bootstrap/_page.html",
            "admin/rail_paginator/default/_page.html",
            "rail_paginator/bootstrap/_page.html",
            "rail_paginator/default/_page.html",
        ]
