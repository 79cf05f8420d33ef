import pytest

from bracketeer import generate_rounds, next_swiss_round, report_score
from bracketeer.brackets.swiss import PairingHistory, _pair_without_repeats
from bracketeer.exceptions import InvalidResultError


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _pairs(round_data):
    return [(m.top.name, m.bottom.name) for m in round_data.matches]


def _report_all(rounds, results):
    for match_id, (top, bottom) in results.items():
        rounds = report_score(rounds, match_id, top, bottom)
    return rounds


def test_first_round_pairs_top_half_with_bottom_half():
    rounds = generate_rounds(6, _names(6), format="swiss")

    assert len(rounds) == 1
    assert rounds[0].name == "Ronda 1"
    assert rounds[0].bracket == "swiss"
    assert _pairs(rounds[0]) == [("P1", "P4"), ("P2", "P5"), ("P3", "P6")]


def test_lowest_seed_gets_the_bye():
    rounds = generate_rounds(5, _names(5), format="swiss")

    assert _pairs(rounds[0]) == [("P1", "P3"), ("P2", "P4"), ("P5", "BYE")]
    assert rounds[0].matches[-1].winner == "P5"


def test_single_player_plays_the_bye():
    rounds = generate_rounds(1, ["Solo"], format="swiss")

    assert _pairs(rounds[0]) == [("Solo", "BYE")]


def test_next_round_pairs_winners_together():
    rounds = generate_rounds(4, ["A", "B", "C", "D"], format="swiss")
    rounds = _report_all(rounds, {1: (2, 0), 2: (2, 0)})

    second = next_swiss_round(rounds)

    assert second.name == "Ronda 2"
    assert _pairs(second) == [("A", "B"), ("C", "D")]
    assert [m.id for m in second.matches] == [3, 4]


def test_next_round_avoids_rematches():
    rounds = generate_rounds(4, ["A", "B", "C", "D"], format="swiss")
    rounds = _report_all(rounds, {1: (2, 0), 2: (2, 0)})
    rounds.append(next_swiss_round(rounds))
    rounds = _report_all(rounds, {3: (2, 1), 4: (2, 0)})

    third = next_swiss_round(rounds)

    assert third.name == "Ronda 3"
    assert _pairs(third) == [("A", "D"), ("B", "C")]


def test_bye_goes_to_lowest_ranked_without_one():
    rounds = generate_rounds(3, ["A", "B", "C"], format="swiss")
    rounds = report_score(rounds, 1, 1, 0)

    second = next_swiss_round(rounds)

    assert _pairs(second) == [("A", "C"), ("B", "BYE")]
    assert second.matches[-1].winner == "B"
    assert [m.id for m in second.matches] == [3, 4]


def test_unreported_match_blocks_next_round():
    rounds = generate_rounds(4, _names(4), format="swiss")

    with pytest.raises(InvalidResultError):
        next_swiss_round(rounds)


def test_next_round_needs_a_swiss_round():
    rounds = generate_rounds(4, _names(4), format="round-robin")

    with pytest.raises(InvalidResultError):
        next_swiss_round(rounds)


def test_draws_are_allowed_in_swiss():
    rounds = generate_rounds(2, ["A", "B"], format="swiss")
    rounds = report_score(rounds, 1, 1, 1)

    match = rounds[0].matches[0]
    assert match.winner is None
    assert (match.top.score, match.bottom.score) == (1, 1)


def test_pairing_history_from_rounds():
    rounds = generate_rounds(3, ["A", "B", "C"], format="swiss")

    history = PairingHistory.from_rounds(rounds)

    assert history.have_played("B", "A")
    assert not history.have_played("A", "C")
    assert history.had_bye == {"C"}


def _history(*pairs):
    history = PairingHistory()
    for first, second in pairs:
        history.add_pairing(first, second)
    return history


def test_pairing_backtracks_around_rematches():
    history = _history(("A", "B"))

    assert _pair_without_repeats(["A", "B", "C", "D"], history) == [
        ("A", "C"),
        ("B", "D"),
    ]


def test_pairing_search_stops_at_step_limit():
    history = _history(("A", "B"))

    assert _pair_without_repeats(["A", "B", "C", "D"], history, max_steps=1) is None


def test_pairing_gives_up_when_everyone_has_met():
    history = _history(("A", "B"), ("A", "C"), ("A", "D"))

    assert _pair_without_repeats(["A", "B", "C", "D"], history) is None


def test_large_field_without_rematch_free_pairing_finishes():
    names = _names(40)
    # P40 has met everyone, so every branch fails only at the bottom
    history = _history(*[("P40", name) for name in names[:-1]])

    assert _pair_without_repeats(names, history) is None


def test_falls_back_to_rank_order_when_rematch_is_unavoidable(caplog):
    rounds = generate_rounds(2, ["A", "B"], format="swiss")
    rounds = _report_all(rounds, {1: (2, 0)})

    with caplog.at_level("WARNING", logger="bracketeer"):
        second = next_swiss_round(rounds)

    assert _pairs(second) == [("A", "B")]
    assert "pairing by rank" in caplog.text
