from bracketeer import calculate_standings, generate_rounds, report_score


def _names(count):
    return [f"P{i}" for i in range(1, count + 1)]


def _by_name(table):
    return {entry.name: entry for entry in table}


def _round_robin_three():
    # Ronda 1: A-BYE (1), B-C (2); Ronda 2: A-C (3), B-BYE (4);
    # Ronda 3: A-B (5), C-BYE (6)
    rounds = generate_rounds(3, ["A", "B", "C"], format="round-robin")
    rounds = report_score(rounds, 2, 2, 1)
    rounds = report_score(rounds, 3, 1, 1)
    return report_score(rounds, 5, 3, 0)


def test_round_robin_points_and_order():
    table = calculate_standings(_round_robin_three(), "round-robin")

    assert [e.name for e in table] == ["A", "B", "C"]
    assert [e.rank for e in table] == [1, 2, 3]
    assert [e.points for e in table] == [4, 3, 1]

    entries = _by_name(table)
    assert (entries["A"].wins, entries["A"].draws, entries["A"].losses) == (1, 1, 0)
    assert (entries["C"].wins, entries["C"].draws, entries["C"].losses) == (0, 1, 1)
    assert entries["A"].game_wins == 4
    assert entries["B"].game_wins == 2


def test_byes_count_without_wins_or_losses():
    table = _by_name(calculate_standings(_round_robin_three(), "round-robin"))

    for entry in table.values():
        assert entry.byes == 1
        assert entry.played == 2


def test_sentinels_never_appear():
    rounds = generate_rounds(5, _names(5), format="double-elimination")

    names = {entry.name for entry in calculate_standings(rounds)}
    assert names == set(_names(5))


def test_unplayed_bracket_ranks_everyone_first():
    rounds = generate_rounds(4, _names(4), format="round-robin")

    table = calculate_standings(rounds, "round-robin")
    assert [e.rank for e in table] == [1, 1, 1, 1]
    assert all(e.points == 0 for e in table)


def test_elimination_points_are_wins():
    rounds = generate_rounds(4, ["A", "B", "C", "D"], format="single-elimination")
    rounds = report_score(rounds, 1, 2, 0)
    rounds = report_score(rounds, 2, 2, 0)
    rounds = report_score(rounds, 3, 2, 1)

    table = calculate_standings(rounds, "single-elimination")
    assert [(e.name, e.points) for e in table] == [
        ("A", 2),
        ("C", 1),
        ("B", 0),
        ("D", 0),
    ]
    assert [e.rank for e in table] == [1, 2, 3, 3]


def test_swiss_breaks_ties_on_buchholz():
    rounds = generate_rounds(3, ["A", "B", "C"], format="swiss")
    rounds = report_score(rounds, 1, 1, 0)

    table = calculate_standings(rounds, "swiss")
    assert [e.name for e in table] == ["A", "B", "C"]
    assert [e.buchholz for e in table] == [0, 1, 0]
    assert [e.rank for e in table] == [1, 2, 3]


def test_free_for_all_has_no_head_to_head_standings():
    rounds = generate_rounds(4, _names(4), format="free-for-all")

    assert calculate_standings(rounds) == []


def test_entry_serialization():
    table = calculate_standings(_round_robin_three(), "round-robin")

    data = table[0].to_dict()
    assert data["name"] == "A"
    assert data["points"] == 4
    assert "opponents" not in data
