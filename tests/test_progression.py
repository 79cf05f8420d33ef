import pytest

from bracketeer import generate_rounds, report_score
from bracketeer.brackets.progression import find_match
from bracketeer.exceptions import InvalidResultError, MatchNotFoundError


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def test_report_score_leaves_input_untouched():
    rounds = generate_rounds(4, _names(4), format="single-elimination")
    before = [r.to_dict() for r in rounds]

    updated = report_score(rounds, 1, 3, 1)

    assert [r.to_dict() for r in rounds] == before
    assert updated[0].matches[0].winner == "P1"
    assert updated[0].matches[0].top.score == 3


def test_unknown_match_id():
    rounds = generate_rounds(4, _names(4), format="single-elimination")

    with pytest.raises(MatchNotFoundError):
        report_score(rounds, 99, 1, 0)


def test_draw_rejected_in_elimination():
    rounds = generate_rounds(4, _names(4), format="single-elimination")

    with pytest.raises(InvalidResultError):
        report_score(rounds, 1, 2, 2)


def test_decided_elimination_match_cannot_be_reported_again():
    rounds = generate_rounds(4, _names(4), format="single-elimination")
    rounds = report_score(rounds, 1, 2, 0)

    with pytest.raises(InvalidResultError):
        report_score(rounds, 1, 0, 2)


def test_match_waiting_on_earlier_result():
    rounds = generate_rounds(4, _names(4), format="single-elimination")

    with pytest.raises(InvalidResultError):
        report_score(rounds, 3, 1, 0)


def test_bye_match_needs_no_result():
    rounds = generate_rounds(3, _names(3), format="round-robin")
    bye = next(m for m in rounds[0].matches if m.is_bye)

    with pytest.raises(InvalidResultError):
        report_score(rounds, bye.id, 1, 0)


def test_group_match_has_no_head_to_head_score():
    rounds = generate_rounds(4, _names(4), format="free-for-all")

    with pytest.raises(InvalidResultError):
        report_score(rounds, 1, 1, 0)


@pytest.mark.parametrize(
    "top, bottom", [(-1, 0), (1, -2), (1.5, 0), (True, 0), ("2", 1)]
)
def test_invalid_scores(top, bottom):
    rounds = generate_rounds(2, _names(2), format="round-robin")

    with pytest.raises(InvalidResultError):
        report_score(rounds, 1, top, bottom)


def test_round_robin_result_can_be_corrected():
    rounds = generate_rounds(2, ["A", "B"], format="round-robin")
    rounds = report_score(rounds, 1, 2, 0)
    rounds = report_score(rounds, 1, 0, 1)

    assert rounds[0].matches[0].winner == "B"


def test_round_robin_draw():
    rounds = generate_rounds(2, ["A", "B"], format="round-robin")
    rounds = report_score(rounds, 1, 0, 0)

    assert rounds[0].matches[0].winner is None
    assert rounds[0].matches[0].is_reported


def test_find_match():
    rounds = generate_rounds(4, _names(4), format="single-elimination")

    assert find_match(rounds, 3) == (1, 0)
    with pytest.raises(MatchNotFoundError):
        find_match(rounds, 0)
