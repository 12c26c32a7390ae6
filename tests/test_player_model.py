import pytest
from pydantic import ValidationError

from gamemanager.models import (
    PLAYER_ADAPTER,
    PRO_TEAM_PLACEHOLDER,
    ProPlayer,
    StandardPlayer,
    derived_rating,
)


def test_player_id_and_username_are_frozen():
    record = StandardPlayer(username="alex", hours_played=3, high_score=150)

    assert record.player_id
    assert record.kind == "standard"

    with pytest.raises(ValidationError):
        record.player_id = "other"  # type: ignore[misc]
    with pytest.raises(ValidationError):
        record.username = "zoe"  # type: ignore[misc]


def test_counters_reject_negative_values():
    with pytest.raises(ValidationError):
        StandardPlayer(username="alex", hours_played=-1)

    record = StandardPlayer(username="alex")
    with pytest.raises(ValidationError):
        record.high_score = -3


def test_each_player_gets_a_fresh_id():
    ids = {StandardPlayer(username=f"p{i}").player_id for i in range(50)}
    assert len(ids) == 50


def test_pro_player_defaults_team_placeholder():
    pro = ProPlayer(username="ace")
    assert pro.team == PRO_TEAM_PLACEHOLDER
    assert pro.is_pro
    assert StandardPlayer(username="rookie").team == ""


def test_derived_rating_formula_and_pro_bonus():
    standard = StandardPlayer(username="a", hours_played=10, high_score=100)
    pro = ProPlayer(username="b", hours_played=10, high_score=100)

    assert derived_rating(standard) == pytest.approx(73.0)
    assert derived_rating(pro) == pytest.approx(93.0)


def test_derived_rating_follows_counter_updates():
    player = StandardPlayer(username="a")
    assert derived_rating(player) == 0.0

    player.high_score = 50
    player.hours_played = 20
    assert derived_rating(player) == pytest.approx(41.0)


def test_adapter_dispatches_on_kind_and_dumps_camel_case():
    pro = PLAYER_ADAPTER.validate_python(
        {"id": "p1", "kind": "pro", "username": "ace", "hoursPlayed": 2, "highScore": 9}
    )
    assert isinstance(pro, ProPlayer)
    assert pro.player_id == "p1"

    payload = PLAYER_ADAPTER.dump_python(pro, mode="json", by_alias=True)
    assert payload == {
        "id": "p1",
        "username": "ace",
        "hoursPlayed": 2,
        "highScore": 9,
        "team": PRO_TEAM_PLACEHOLDER,
        "rating": 0.0,
        "kind": "pro",
    }


def test_str_includes_key_fields():
    pro = ProPlayer(player_id="p1", username="ace", hours_played=2, high_score=9, rating=4.5, team="Red")
    text = str(pro)
    assert text.startswith("p1 | ace [PRO] |")
    assert "Hours: 2" in text
    assert "Score: 9" in text
    assert "Rating: 4.50" in text
    assert "Team: Red" in text


def test_describe_overrides_shown_rating():
    player = StandardPlayer(player_id="p1", username="alex", rating=1.5)

    assert "Rating: 1.50" in player.describe()
    assert "Rating: 42.00" in player.describe(42.0)
