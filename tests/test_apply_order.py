import pytest

from repositories.event_repo import EventRepository
from repositories.exceptions import InvalidOrderByError
from repositories.order_by import OrderTerm, SortDirection, parse_order_by, split_tokens
from repositories.queries import EVENTS, RACES, template_for
from repositories.race_repo import RaceRepository


@pytest.mark.parametrize(
    "order_by, expected",
    [
        pytest.param("", " ORDER BY advertised_start_time", id="empty_order_by_default"),
        pytest.param(",", " ORDER BY advertised_start_time", id="empty_order_by_fields_default"),
        pytest.param("  ,  ", " ORDER BY advertised_start_time", id="whitespace_fields_default"),
        pytest.param("meeting_id", " ORDER BY meeting_id", id="order_by_single_field"),
        pytest.param("meeting_id desc", " ORDER BY meeting_id desc", id="order_by_single_field_desc"),
        pytest.param(
            "meeting_id desc, advertised_start_time",
            " ORDER BY meeting_id desc, advertised_start_time",
            id="order_by_multiple_fields",
        ),
        pytest.param(
            "  meeting_id desc,  advertised_start_time  ",
            " ORDER BY meeting_id desc, advertised_start_time",
            id="remove_additional_spaces",
        ),
        pytest.param(
            "meeting_id desc,, ,advertised_start_time",
            " ORDER BY meeting_id desc, advertised_start_time",
            id="ignore_empty_fields",
        ),
        pytest.param("status, number ASC", " ORDER BY status, number asc", id="computed_column_and_upper_case"),
    ],
)
def test_race_apply_order(fake_pool, order_by, expected):
    base = template_for(RACES)

    assert RaceRepository(fake_pool).apply_order(base, order_by) == base + expected


def test_event_apply_order(fake_pool):
    base = template_for(EVENTS)

    query = EventRepository(fake_pool).apply_order(base, "sport_id desc,status")

    assert query == base + " ORDER BY sport_id desc, status"


@pytest.mark.parametrize(
    "order_by",
    [
        "meeting_id; DROP TABLE races",
        "visible",  # not an events column
        "sport_id sideways",
        "sport_id desc nulls",
    ],
)
def test_event_apply_order_rejects_unknown_tokens(fake_pool, order_by):
    with pytest.raises(InvalidOrderByError):
        EventRepository(fake_pool).apply_order("Q", order_by)


def test_split_tokens_drops_empty_segments():
    assert split_tokens("a,, ,b ,") == ["a", "b"]
    assert split_tokens("   ") == []


def test_parse_order_by_returns_terms_in_input_order():
    terms = parse_order_by("name DESC, id", ["id", "name"])

    assert terms == [OrderTerm("name", SortDirection.DESC), OrderTerm("id")]
    assert [str(t) for t in terms] == ["name desc", "id"]


def test_invalid_order_by_error_is_a_value_error():
    with pytest.raises(ValueError, match="unknown column"):
        parse_order_by("colour", ["id"])
