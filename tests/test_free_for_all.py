import pytest

from bracketeer import TournamentConfig, generate_rounds
from bracketeer.exceptions import ValidationError


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _group_sizes(round_data):
    return [len(m.players) for m in round_data.matches]


def _config(**overrides):
    return TournamentConfig(name="FFA", format="free-for-all", **overrides)


def test_nineteen_players_funnel_into_a_final():
    rounds = generate_rounds(19, _names(19), format="free-for-all")

    assert [r.name for r in rounds] == ["Fase 1", "Fase 2", "Final"]
    assert _group_sizes(rounds[0]) == [8, 8, 3]
    assert _group_sizes(rounds[1]) == [8, 3]
    assert _group_sizes(rounds[2]) == [7]


def test_first_phase_keeps_seed_order_in_contiguous_groups():
    names = _names(19)
    rounds = generate_rounds(19, names, format="free-for-all")

    grouped = [p.name for m in rounds[0].matches for p in m.players]
    assert grouped == names
    assert [p.name for p in rounds[0].matches[2].players] == ["P17", "P18", "P19"]


def test_later_phases_hold_placeholders():
    rounds = generate_rounds(20, _names(20), format="free-for-all")

    assert [r.name for r in rounds] == ["Fase 1", "Fase 2", "Final"]
    for round_data in rounds[1:]:
        for match in round_data.matches:
            assert all(p.name == "TBD" for p in match.players)
    assert _group_sizes(rounds[-1]) == [8]


def test_small_field_is_a_single_final():
    rounds = generate_rounds(8, _names(8), format="free-for-all")

    assert [r.name for r in rounds] == ["Final"]
    assert [p.name for p in rounds[0].matches[0].players] == _names(8)
    assert rounds[0].matches[0].capacity == 8


def test_single_player_final():
    rounds = generate_rounds(1, ["Solo"], format="free-for-all")

    assert [r.name for r in rounds] == ["Final"]
    assert [p.name for p in rounds[0].matches[0].players] == ["Solo"]


def test_config_controls_group_size_and_advancement():
    rounds = generate_rounds(
        8,
        _names(8),
        format="free-for-all",
        config=_config(group_capacity=4, advance_per_group=2),
    )

    assert [r.name for r in rounds] == ["Fase 1", "Final"]
    assert _group_sizes(rounds[0]) == [4, 4]
    assert _group_sizes(rounds[1]) == [4]


def test_every_group_respects_capacity():
    rounds = generate_rounds(
        50, _names(50), format="free-for-all", config=_config(group_capacity=6)
    )

    for round_data in rounds:
        assert all(0 < size <= 6 for size in _group_sizes(round_data))
    assert len(rounds[-1].matches) == 1


def test_match_ids_are_sequential():
    rounds = generate_rounds(19, _names(19), format="free-for-all")

    ids = [m.id for r in rounds for m in r.matches]
    assert ids == list(range(1, len(ids) + 1))


@pytest.mark.parametrize(
    "capacity, advance",
    [(1, 1), (4, 4), (4, 0), (8, 9)],
)
def test_invalid_group_settings_are_rejected(capacity, advance):
    with pytest.raises(ValidationError):
        generate_rounds(
            8,
            _names(8),
            format="free-for-all",
            config=_config(group_capacity=capacity, advance_per_group=advance),
        )


def test_custom_grouping_strategy():
    def alternate(participants, capacity):
        return [participants[0::2], participants[1::2]]

    rounds = generate_rounds(
        8,
        _names(8),
        format="free-for-all",
        config=_config(group_capacity=4, advance_per_group=2),
        grouping=alternate,
    )

    assert [p.name for p in rounds[0].matches[0].players] == ["P1", "P3", "P5", "P7"]
    assert [p.name for p in rounds[0].matches[1].players] == ["P2", "P4", "P6", "P8"]


def test_grouping_that_drops_a_player_is_rejected():
    def lossy(participants, capacity):
        return [participants[:-1]]

    with pytest.raises(ValidationError):
        generate_rounds(4, _names(4), format="free-for-all", grouping=lossy)


def test_sixteen_players_two_groups_then_final():
    rounds = generate_rounds(16, _names(16), format="free-for-all")

    assert rounds[0].name == "Fase 1"
    assert _group_sizes(rounds[0]) == [8, 8]
    assert rounds[-1].name == "Final"
    assert len(rounds[-1].matches) == 1
