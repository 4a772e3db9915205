import pandas as pd
import pytest
from pandas.testing import assert_frame_equal

from devops_console.core.config import ALL_OPTION, QUERY_SPECS
from devops_console.core.query import (
    TableState,
    filter_and_search,
    filter_options,
    paginate,
    run_query,
    total_pages,
)

SEARCH_FIELDS = ("title", "description", "id")


def _incidents(n=23):
    services = ["API Gateway", "Frontend App", "User Service"]
    statuses = ["Open", "Investigating", "Resolved", "Closed"]
    severities = ["Low", "High", "Critical", "Medium"]
    rows = []
    for i in range(n):
        rows.append(
            {
                "id": f"INC-{1000 + i}",
                "title": f"Service {services[i % 3]} experiencing High Latency",
                "description": f"Detailed investigation for incident INC-{1000 + i}.",
                "service": services[i % 3],
                "status": statuses[i % 4],
                "severity": severities[i % 4],
            }
        )
    return pd.DataFrame(rows)


def test_all_filters_and_empty_search_return_everything():
    df = _incidents()
    out = filter_and_search(df, {"status": ALL_OPTION, "service": ALL_OPTION}, "", SEARCH_FIELDS)
    assert_frame_equal(out, df)


def test_filter_result_is_ordered_subset():
    df = _incidents()
    out = filter_and_search(df, {"status": "Open", "service": ALL_OPTION}, "", SEARCH_FIELDS)
    assert len(out) == 6
    assert (out["status"] == "Open").all()
    assert list(out.index) == sorted(out.index)
    assert set(out.index).issubset(df.index)


def test_combined_filters_are_conjunctive():
    df = _incidents()
    out = filter_and_search(df, {"status": "Open", "service": "API Gateway"}, "", SEARCH_FIELDS)
    assert not out.empty
    assert (out["status"] == "Open").all()
    assert (out["service"] == "API Gateway").all()


def test_search_is_case_insensitive_substring():
    df = _incidents()
    lower = filter_and_search(df, {}, "inc-1005", SEARCH_FIELDS)
    upper = filter_and_search(df, {}, "INC-1005", SEARCH_FIELDS)
    assert list(lower["id"]) == ["INC-1005"]
    assert_frame_equal(lower, upper)


def test_search_ignores_fields_outside_search_fields():
    df = _incidents()
    # "Frontend" only appears in title and service; restrict search to id
    out = filter_and_search(df, {}, "Frontend", ("id",))
    assert out.empty


def test_search_treats_term_literally():
    df = _incidents()
    assert filter_and_search(df, {}, "INC-10.5", SEARCH_FIELDS).empty


def test_filter_and_search_is_idempotent_and_pure():
    df = _incidents()
    before = df.copy()
    filters = {"severity": "High"}
    once = filter_and_search(df, filters, "latency", SEARCH_FIELDS)
    twice = filter_and_search(once, filters, "latency", SEARCH_FIELDS)
    assert_frame_equal(once, twice)
    assert_frame_equal(df, before)


def test_empty_collection_passes_through():
    empty = _incidents().iloc[0:0]
    assert filter_and_search(empty, {"status": "Open"}, "x", SEARCH_FIELDS).empty
    assert filter_options(empty, "status") == [ALL_OPTION]


def test_pagination_of_23_rows():
    df = _incidents(23)
    assert total_pages(len(df), 10) == 3
    first = paginate(df, 10, 1)
    last = paginate(df, 10, 3)
    assert len(first.rows) == 10
    assert list(last.rows["id"]) == ["INC-1020", "INC-1021", "INC-1022"]
    assert last.total_pages == 3
    assert last.total_rows == 23


@pytest.mark.parametrize("page_number", [0, -1, 4])
def test_out_of_range_pages_are_empty(page_number):
    page = paginate(_incidents(23), 10, page_number)
    assert page.is_empty
    assert page.total_pages == 3


def test_pages_concatenate_to_the_view():
    df = _incidents(23)
    pages = [paginate(df, 10, n).rows for n in range(1, 4)]
    assert_frame_equal(pd.concat(pages), df)


def test_zero_rows_have_zero_pages():
    assert total_pages(0, 10) == 0
    assert paginate(_incidents(0), 10, 1).is_empty


def test_non_positive_page_size_rejected():
    with pytest.raises(ValueError):
        total_pages(5, 0)


def test_severity_options_follow_rank_order():
    df = _incidents()
    assert filter_options(df, "severity") == [ALL_OPTION, "Critical", "High", "Medium", "Low"]


def test_other_options_follow_first_seen_order():
    df = _incidents()
    assert filter_options(df, "service") == [ALL_OPTION, "API Gateway", "Frontend App", "User Service"]


def test_table_state_resets_page_on_filter_or_search_change():
    state = TableState().with_page(3)
    assert state.page == 3
    assert state.with_filter("status", "Open").page == 1
    assert state.with_search("gateway").page == 1
    # Unchanged values keep the page
    assert state.with_filter("status", ALL_OPTION) is state
    assert state.with_search("") is state


def test_run_query_uses_spec_page_size():
    df = _incidents(23)
    spec = QUERY_SPECS["incidents"]
    state = TableState().with_filter("service", "User Service")
    page = run_query(df, spec, state)
    assert page.total_rows == 7
    assert page.total_pages == 1
    assert (page.rows["service"] == "User Service").all()


def test_search_matches_regardless_of_term_case():
    df = _incidents()
    df.loc[0, "title"] = "API Gateway returning 502"
    upper = filter_and_search(df, {}, "API", SEARCH_FIELDS)
    lower = filter_and_search(df, {}, "api", SEARCH_FIELDS)
    assert_frame_equal(upper, lower)
    assert len(upper) == 8
    assert (upper["title"].str.lower().str.contains("api")).all()


def test_surrounding_spaces_are_part_of_the_term():
    df = _incidents()
    assert not filter_and_search(df, {}, " inc-1005", SEARCH_FIELDS).empty
    assert filter_and_search(df, {}, "inc-1005 ", SEARCH_FIELDS).empty
