from hackenbush.analysis import ColonStrategy, position_value
from hackenbush.core import DyadicNumber, Player, Position, build_position


def edge(edge_id: str, a: str, b: str, color: str) -> dict:
    return {"id": edge_id, "from": a, "to": b, "color": color}


def fields(d: DyadicNumber):
    return (d.numerator, d.denominator)


def test_single_blue_edge_is_worth_one() -> None:
    position = build_position([edge("e1", "ground", "a", "blue")])

    analysis = ColonStrategy().analyse(position, Player.BLUE)

    assert fields(analysis.value) == (1, 1)
    assert analysis.winning
    assert analysis.optimal_move == "e1"


def test_parallel_blue_and_red_cancel() -> None:
    position = build_position([edge("e1", "ground", "a", "blue"), edge("e2", "ground", "a", "red")])

    assert fields(position_value(position)) == (0, 1)
    for player in (Player.BLUE, Player.RED):
        analysis = ColonStrategy().analyse(position, player)
        assert not analysis.winning
        assert analysis.optimal_move is None


def test_chain_value_halves_with_height() -> None:
    position = build_position([edge("e1", "ground", "a", "blue"), edge("e2", "a", "b", "red")])

    value = position_value(position)

    assert fields(value) == (1, 2)
    assert value.sign() > 0


def test_green_edges_are_ignored() -> None:
    base = [edge("e1", "ground", "a", "blue"), edge("e2", "a", "b", "red")]
    with_green = base + [edge("g1", "ground", "c", "green"), edge("g2", "b", "d", "green")]

    assert fields(position_value(build_position(with_green))) == (1, 2)

    hanging = build_position([edge("g", "ground", "x", "green"), edge("r", "x", "y", "red")])
    assert fields(position_value(hanging)) == (0, 1)


def test_cycle_uses_same_formula() -> None:
    position = build_position(
        [
            edge("e1", "ground", "a", "blue"),
            edge("e2", "a", "b", "blue"),
            edge("e3", "b", "ground", "red"),
        ]
    )
    assert fields(position_value(position)) == (1, 2)


def test_leader_keeps_smallest_favourable_margin() -> None:
    position = build_position(
        [
            edge("e1", "ground", "a", "blue"),
            edge("e2", "ground", "b", "blue"),
            edge("e3", "a", "c", "blue"),
            edge("e4", "ground", "r", "red"),
        ]
    )
    analysis = ColonStrategy().analyse(position, Player.BLUE)

    assert fields(analysis.value) == (3, 2)
    assert analysis.optimal_move == "e2"
    assert analysis.winning


def test_leader_settles_for_zero_when_margin_cannot_be_kept() -> None:
    position = build_position(
        [
            edge("e1", "ground", "a", "blue"),
            edge("e2", "a", "c", "blue"),
            edge("e3", "ground", "r", "red"),
        ]
    )
    analysis = ColonStrategy().analyse(position, Player.BLUE)

    assert fields(analysis.value) == (1, 2)
    assert analysis.optimal_move == "e2"
    assert analysis.winning


def test_leader_with_only_sign_flipping_cuts_takes_smallest() -> None:
    position = build_position(
        [
            edge("e1", "ground", "a", "blue"),
            edge("e2", "ground", "b", "blue"),
            edge("e3", "ground", "r", "red"),
            edge("e4", "r", "s", "red"),
        ]
    )
    analysis = ColonStrategy().analyse(position, Player.BLUE)

    assert fields(analysis.value) == (1, 2)
    assert analysis.optimal_move == "e1"
    assert analysis.winning


def test_zero_position_has_no_good_move() -> None:
    position = build_position(
        [
            edge("e1", "ground", "a", "blue"),
            edge("e2", "a", "c", "blue"),
            edge("e3", "ground", "r", "red"),
            edge("e4", "r", "s", "red"),
        ]
    )
    analysis = ColonStrategy().analyse(position, Player.RED)

    assert fields(analysis.value) == (0, 1)
    assert analysis.optimal_move is None
    assert not analysis.winning


def test_trailing_player_keeps_the_gap_small() -> None:
    position = build_position(
        [
            edge("b1", "ground", "a", "blue"),
            edge("b2", "a", "c", "blue"),
            edge("b3", "ground", "d", "blue"),
            edge("r1", "ground", "r", "red"),
            edge("r2", "r", "s", "red"),
        ]
    )
    analysis = ColonStrategy().analyse(position, Player.RED)

    assert fields(analysis.value) == (1, 1)
    assert analysis.optimal_move == "r2"
    assert not analysis.winning


def test_red_leader_mirrors_blue() -> None:
    position = build_position([edge("r1", "ground", "a", "red"), edge("r2", "a", "b", "red")])
    analysis = ColonStrategy().analyse(position, Player.RED)

    assert fields(analysis.value) == (-3, 2)
    assert analysis.optimal_move == "r2"
    assert analysis.winning


def test_no_candidate_edges_reports_no_move() -> None:
    position = build_position([edge("e1", "ground", "a", "blue")])
    analysis = ColonStrategy().analyse(position, Player.RED)

    assert analysis.optimal_move is None
    assert not analysis.winning
    assert fields(analysis.value) == (1, 1)


def test_empty_position_is_zero() -> None:
    analysis = ColonStrategy().analyse(Position(), Player.BLUE)

    assert fields(analysis.value) == (0, 1)
    assert analysis.optimal_move is None
    assert not analysis.winning
