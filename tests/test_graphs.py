import pytest

from algodrills.graphs import (
    can_escape,
    count_components,
    count_reachable,
    dfs_bfs_order,
    housing_complexes,
    paintings,
    reachability_matrix,
)


def test_orders_on_path_follow_the_path():
    edges = [(1, 2), (2, 3), (3, 4)]
    dfs, bfs = dfs_bfs_order(4, edges, 1)
    assert dfs == [1, 2, 3, 4]
    assert bfs == [1, 2, 3, 4]


def test_orders_differ_on_branching_graph():
    dfs, bfs = dfs_bfs_order(4, [(1, 2), (1, 3), (2, 4)], 1)
    assert dfs == [1, 2, 4, 3]
    assert bfs == [1, 2, 3, 4]


def test_orders_cover_only_reachable_vertices():
    edges = [(1, 2), (2, 5), (3, 4)]
    dfs, bfs = dfs_bfs_order(5, edges, 2)
    assert dfs[0] == 2 and bfs[0] == 2
    assert set(dfs) == set(bfs) == {1, 2, 5}
    assert len(dfs) == len(set(dfs))


def test_orders_reject_bad_vertex():
    with pytest.raises(ValueError):
        dfs_bfs_order(3, [(1, 4)], 1)
    with pytest.raises(ValueError):
        dfs_bfs_order(3, [(1, 2)], 7)


def test_count_reachable_on_path():
    n = 6
    edges = [(i, i + 1) for i in range(1, n)]
    assert count_reachable(n, edges) == n - 1


def test_count_reachable_isolated_start():
    assert count_reachable(4, [(2, 3), (3, 4)]) == 0


def test_count_reachable_ignores_other_components():
    edges = [(1, 2), (2, 3), (4, 5)]
    assert count_reachable(5, edges, 1) == len(dfs_bfs_order(5, edges, 1)[0]) - 1
    assert count_reachable(5, edges, 4) == 1


def test_count_components_without_edges():
    assert count_components(7, []) == 7


def test_count_components_connected_graph():
    assert count_components(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) == 1


def test_count_components_duplicate_edges_do_not_matter():
    edges = [(1, 2), (3, 4)]
    assert count_components(5, edges) == count_components(5, edges + edges + [(2, 1)])


def test_reachability_self_loop_alone_is_not_a_cycle():
    assert reachability_matrix([[1]]) == [[0]]


def test_reachability_two_cycle_reaches_everything():
    assert reachability_matrix([[0, 1], [1, 0]]) == [[1, 1], [1, 1]]


def test_reachability_chain_is_transitive_and_directed():
    graph = [[0, 1, 0], [0, 0, 1], [0, 0, 0]]
    result = reachability_matrix(graph)
    assert result[0][2] == 1
    assert result[2] == [0, 0, 0]
    assert all(result[i][i] == 0 for i in range(3))


def test_reachability_contains_edges_and_is_closed():
    graph = [
        [0, 0, 0, 1, 0],
        [1, 0, 0, 0, 0],
        [0, 0, 0, 0, 0],
        [0, 1, 0, 0, 0],
        [0, 0, 1, 0, 0],
    ]
    result = reachability_matrix(graph)
    size = len(graph)
    for i in range(size):
        for j in range(size):
            if graph[i][j] == 1 and i != j:
                assert result[i][j] == 1
            for m in range(size):
                if result[i][j] and result[j][m]:
                    assert result[i][m] == 1


def test_reachability_requires_square_matrix():
    with pytest.raises(ValueError):
        reachability_matrix([[0, 1], [1]])


def test_paintings_empty_canvas():
    assert paintings([[0, 0], [0, 0]]) == (0, 0)


def test_paintings_full_canvas_is_one_picture():
    rows, cols = 3, 4
    assert paintings([[1] * cols for _ in range(rows)]) == (1, rows * cols)


def test_paintings_checkerboard_has_unit_pictures():
    grid = [[(r + c) % 2 for c in range(5)] for r in range(4)]
    ones = sum(map(sum, grid))
    assert paintings(grid) == (ones, 1)


def test_paintings_diagonal_cells_are_separate():
    grid = [[1, 0], [0, 1]]
    count, largest = paintings(grid)
    assert count == 2
    assert largest == 1


def test_housing_complexes_accepts_digit_strings():
    grid = ["0110100", "0110101", "1110101", "0000111", "0100000", "0111110", "0111000"]
    sizes = housing_complexes(grid)
    assert sizes == sorted(sizes)
    assert sum(sizes) == sum(row.count("1") for row in grid)
    assert sizes == [7, 8, 9]


def test_housing_complexes_none():
    assert housing_complexes(["000", "000"]) == []


def test_housing_complexes_string_and_int_rows_agree():
    text = ["1001", "1001", "0110"]
    numbers = [[int(ch) for ch in row] for row in text]
    assert housing_complexes(text) == housing_complexes(numbers)


def test_escape_by_jumping_past_the_end():
    assert can_escape(2, ["10", "10"]) is True
    assert can_escape(1, ["10", "10"]) is False


def test_escape_needs_step_back():
    assert can_escape(3, ["1000010", "0011000"]) is True


def test_collapsed_cell_blocks_escape():
    assert can_escape(2, ["10010", "01100"]) is False


def test_escape_rejects_malformed_lanes():
    with pytest.raises(ValueError):
        can_escape(1, ["111"])
    with pytest.raises(ValueError):
        can_escape(1, ["111", "11"])