import pytest

from pathsolver.core.best_first import BestFirstAlgo, search
from pathsolver.core.errors import MissingEndpointError, NoPathError
from pathsolver.core.frontier import reconstruct
from pathsolver.core.metric import distance
from pathsolver.core.parser import parse_grid
from pathsolver.core.types import Classification

WALLED_OFF = "\n".join([
    "S....",
    ".BBB.",
    ".BXB.",
    ".BBB.",
    ".....",
])

DETOUR = "\n".join([
    "......",
    ".BBBB.",
    "S...B.",
    ".BB.BX",
    "......",
])


def path_cost(cells):
    return sum(distance(a, b) for a, b in zip(cells, cells[1:]))


def test_direct_diagonal():
    grid = parse_grid("S.\n.X")
    terminal = search(grid)
    assert terminal.cost == pytest.approx(1.5)
    assert reconstruct(terminal) == [grid.cell_at(0, 0), grid.cell_at(1, 1)]


def test_diagonal_between_blocked_corners():
    grid = parse_grid("SB\nBX")
    terminal = search(grid)
    assert terminal.cost == pytest.approx(1.5)
    assert [(c.row, c.col) for c in reconstruct(terminal)] == [(0, 0), (1, 1)]


def test_detour_around_wall():
    grid = parse_grid(DETOUR)
    cells = reconstruct(search(grid))
    assert path_cost(cells) == pytest.approx(6.5)
    assert cells[0].kind is Classification.START
    assert cells[-1].kind is Classification.FINISH


def test_missing_start():
    with pytest.raises(MissingEndpointError) as exc:
        search(parse_grid("..\n.X"))
    assert exc.value.kind is Classification.START


def test_missing_finish():
    with pytest.raises(MissingEndpointError) as exc:
        search(parse_grid("S.\n.."))
    assert exc.value.kind is Classification.FINISH
    assert "finish" in str(exc.value)


def test_isolated_start_drains_frontier():
    with pytest.raises(NoPathError):
        search(parse_grid("SB.\nBB.\n..X"))


def test_walled_off_finish():
    with pytest.raises(NoPathError):
        search(parse_grid(WALLED_OFF))


def test_step_protocol():
    algo = BestFirstAlgo()
    algo.init(parse_grid("S..\n...\n..X"))
    first = algo.step()
    assert first.status == "running"
    assert first.current == algo.start_cell
    assert len(first.expanded) == 3

    res = first
    while res.status == "running":
        res = algo.step()
    assert res.status == "done"
    assert res.path[0] == algo.start_cell and res.path[-1] == algo.goal_cell
    assert res.metrics["total_cost"] == pytest.approx(3.0)
    assert res.metrics["path_len"] == 3

    again = algo.step()
    assert again.status == "done"
    assert again.path == res.path


def test_step_before_init_is_idle():
    assert BestFirstAlgo().step().status == "idle"


def test_run_before_init():
    with pytest.raises(RuntimeError):
        BestFirstAlgo().run()


def test_no_path_is_sticky():
    algo = BestFirstAlgo()
    algo.init(parse_grid(WALLED_OFF))
    assert algo.step().status == "no_path"
    assert algo.step().status == "no_path"
    assert algo.popped_count == 0


def test_reset_replays_same_result():
    algo = BestFirstAlgo()
    algo.init(parse_grid(DETOUR))
    first = reconstruct(algo.run())
    algo.reset()
    assert algo.result is None and len(algo.frontier) == 1
    assert reconstruct(algo.run()) == first


def test_start_next_to_finish_orthogonally():
    terminal = search(parse_grid("SX"))
    assert terminal.cost == pytest.approx(1.0)
    assert terminal.length == 2


@pytest.mark.parametrize("seed", range(40))
def test_random_maps_are_optimal(seed, make_map, reference_cost):
    grid = parse_grid(make_map(seed))
    expected = reference_cost(grid)
    if expected is None:
        with pytest.raises(NoPathError):
            search(grid)
        return

    cells = reconstruct(search(grid))
    assert path_cost(cells) == pytest.approx(expected)
    assert cells[0] == grid.find(Classification.START)
    assert cells[-1] == grid.find(Classification.FINISH)
    assert all(not grid.is_block(c) for c in cells)
    for a, b in zip(cells, cells[1:]):
        assert max(abs(a.row - b.row), abs(a.col - b.col)) == 1


def test_repeated_searches_agree_on_cost():
    grid = parse_grid(DETOUR)
    costs = {search(grid).cost for _ in range(5)}
    assert len(costs) == 1
