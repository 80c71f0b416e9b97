import pytest

from repositories.queries import EVENTS, RACES, RACES_TABLE, template_for


def test_race_template_selects_columns_and_computed_status():
    query = template_for(RACES)

    assert query.startswith(
        "SELECT id, meeting_id, name, number, visible, advertised_start_time, CASE WHEN"
    )
    assert "THEN 0 ELSE 1 END AS status" in query
    assert query.endswith(" FROM races")


def test_event_template_has_no_computed_columns():
    assert template_for(EVENTS) == (
        "SELECT id, sport_id, name, advertised_start_time, status FROM events"
    )


def test_template_is_stable_between_calls():
    assert template_for(RACES) == template_for(RACES)


def test_unknown_entity_is_rejected():
    with pytest.raises(ValueError):
        template_for("horses")


def test_race_selectable_columns_include_status():
    assert RACES_TABLE.selectable_columns[-1] == "status"
    assert "meeting_id" in RACES_TABLE.selectable_columns
