import unittest

from mazeworks.grid import MazeGrid, generate_maze
from mazeworks.grid.model import Direction
from mazeworks.organic import generate_organic_maze
from mazeworks.presets import ALGORITHM_IDS
from mazeworks.solver import (
    GridAdapter,
    Solution,
    adapter_for_maze,
    get_solver,
    is_perfect_maze,
    path_to_directions,
    register_solver,
    registered_solver_ids,
    solve_maze,
    validate_maze,
)
from mazeworks.solver import algorithms


def open_loop_grid() -> MazeGrid:
    grid = MazeGrid(2, 2)
    for first, second in (((0, 0), (0, 1)), ((0, 0), (1, 0)), ((0, 1), (1, 1)), ((1, 0), (1, 1))):
        grid.remove_wall_between(grid.get_cell(*first), grid.get_cell(*second))
    return grid


class GridSolverTests(unittest.TestCase):
    def test_uncarved_grid_has_no_solution(self) -> None:
        grid = MazeGrid(3, 3)
        self.assertIsNone(solve_maze(grid))
        self.assertFalse(validate_maze(grid))
        report = is_perfect_maze(grid)
        self.assertFalse(report.is_perfect)
        self.assertEqual((report.reachable_cells, report.total_cells), (1, 9))

    def test_ties_resolved_by_direction_order(self) -> None:
        solution = solve_maze(open_loop_grid())
        self.assertEqual(solution.path, [(0, 0), (0, 1), (1, 1)])
        self.assertEqual(solution.length, 3)
        self.assertTrue(solution.solved)

    def test_adapter_skips_exits_off_the_grid(self) -> None:
        grid = open_loop_grid()
        grid.open_entrance()
        grid.open_exit()
        adapter = GridAdapter(grid)
        self.assertEqual(adapter.get_neighbors((0, 0)), [(0, 1), (1, 0)])
        self.assertEqual(adapter.get_neighbors((1, 1)), [(0, 1), (1, 0)])
        self.assertEqual(adapter.get_total_cells(), 4)

    def test_paths_step_through_open_walls(self) -> None:
        for algorithm in ALGORITHM_IDS:
            for seed in range(20):
                maze = generate_maze("9-11", seed, algorithm)
                solution = solve_maze(maze)
                self.assertIsNotNone(solution, f"{algorithm} seed {seed}")
                self.assertEqual(solution.path[0], (0, 0))
                self.assertEqual(solution.path[-1], (maze.rows - 1, maze.cols - 1))
                for (row, col), (next_row, next_col) in zip(solution.path, solution.path[1:]):
                    self.assertEqual(abs(row - next_row) + abs(col - next_col), 1)
                    self.assertTrue(maze.grid.are_connected(row, col, next_row, next_col))
                self.assertEqual(len(path_to_directions(solution.path)), solution.length - 1)

    def test_path_to_directions(self) -> None:
        path = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
        self.assertEqual(path_to_directions(path), ["right", "down", "left", "up"])
        self.assertEqual(path_to_directions([(0, 0)]), [])
        self.assertEqual(path_to_directions([3, 4, 5]), [])

    def test_solution_to_dict(self) -> None:
        data = solve_maze(open_loop_grid()).to_dict()
        self.assertEqual(data, {"path": [[0, 0], [0, 1], [1, 1]], "length": 3, "solved": True})


class OrganicSolverTests(unittest.TestCase):
    def test_organic_mazes_validate(self) -> None:
        for seed in (5, 6, 7):
            maze = generate_organic_maze("3", seed)
            self.assertTrue(validate_maze(maze))
            report = is_perfect_maze(maze)
            self.assertEqual(report.total_cells, 20)
            self.assertEqual(report.to_dict()["reachableCells"], report.reachable_cells)

    def test_walled_organic_maze_has_no_solution(self) -> None:
        maze = generate_organic_maze("3", 8)
        if maze.start_id == maze.finish_id:
            self.skipTest("start and finish coincide")
        for node in maze.graph.nodes:
            for neighbor_id in node.neighbors:
                maze.graph.walls.add((min(node.id, neighbor_id), max(node.id, neighbor_id)))
        self.assertIsNone(solve_maze(maze))


class SolverRegistryTests(unittest.TestCase):
    def tearDown(self) -> None:
        algorithms._REGISTRY.pop("first-step", None)

    def test_bfs_is_registered(self) -> None:
        self.assertIn("bfs", registered_solver_ids())
        self.assertIs(get_solver("bfs"), algorithms.solve_bfs)

    def test_unknown_solver_falls_back_to_bfs(self) -> None:
        with self.assertLogs("mazeworks.solver", level="WARNING"):
            solver = get_solver("astar")
        self.assertIs(solver, algorithms.solve_bfs)
        maze = generate_maze("3", 5000, "prim")
        self.assertEqual(solve_maze(maze, "astar").path, solve_maze(maze).path)

    def test_custom_solver(self) -> None:
        @register_solver("first-step")
        def first_step(adapter):
            start = adapter.get_start()
            return Solution(path=[start], length=1, solved=False)

        self.assertIn("first-step", registered_solver_ids())
        maze = generate_maze("3", 1)
        self.assertEqual(solve_maze(maze, "first-step").path, [(0, 0)])
        self.assertFalse(validate_maze(maze, "first-step"))

    def test_unsupported_maze_type(self) -> None:
        with self.assertRaises(TypeError):
            adapter_for_maze("not a maze")
        with self.assertRaises(TypeError):
            solve_maze(None)


if __name__ == "__main__":
    unittest.main()
