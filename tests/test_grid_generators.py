import unittest

from mazeworks.grid import (
    GridMazeGenerator,
    carve_grid,
    generate_algorithm_showcase,
    generate_maze,
    generate_mazes,
    get_grid_algorithm,
)
from mazeworks.grid.model import Direction
from mazeworks.presets import ALGORITHM_IDS, ALGORITHMS
from mazeworks.solver import is_perfect_maze, solve_maze, validate_maze

PRIM_9_11_SEED_42 = [
    "38aaedddb8ae",
    "d1cdb026d1ac",
    "167596d922e7",
    "5dd169049e9e",
    "5306b477592e",
    "1869e3c961ae",
    "75b4bc30a0ae",
    "b0a4b4d1e79e",
    "b6b2c341e92e",
    "db8a4b00808c",
    "3a690a457575",
    "b8867963e794",
    "b65ba0ae9e55",
    "9a0eb0ae1e75",
    "594ba0aa0cb6",
    "755ba0ae559e",
    "967980ac575d",
    "3ae773e73a24",
]

PRIM_3_SEED_5000 = ["1888cd", "775516", "9a471c", "7b0e77", "d90aae", "361acd", "ba6b24"]


def count_open_passages(grid) -> int:
    passages = 0
    for cell in grid.iter_cells():
        for direction in (Direction.RIGHT, Direction.BOTTOM):
            if grid.get_neighbor(cell.row, cell.col, direction) is not None and not cell.has_wall(direction):
                passages += 1
    return passages


class PrimReferenceTests(unittest.TestCase):
    def test_hard_preset_reference_maze(self) -> None:
        maze = generate_maze("9-11", 42, ALGORITHMS.PRIM)
        self.assertEqual((maze.rows, maze.cols), (18, 12))
        self.assertEqual(maze.grid.wall_signature(), PRIM_9_11_SEED_42)
        self.assertFalse(maze.grid.get_cell(0, 0).has_wall(Direction.TOP))
        self.assertFalse(maze.grid.get_cell(17, 11).has_wall(Direction.BOTTOM))

        solution = solve_maze(maze)
        self.assertIsNotNone(solution)
        self.assertEqual(solution.length, 33)
        self.assertEqual(solution.path[:6], [(0, 0), (0, 1), (1, 1), (2, 1), (2, 0), (3, 0)])
        self.assertEqual(solution.path[-1], (17, 11))

    def test_intro_preset_reference_maze(self) -> None:
        maze = generate_maze("3", 5000, ALGORITHMS.PRIM)
        self.assertEqual((maze.rows, maze.cols), (7, 6))
        self.assertEqual(maze.grid.wall_signature(), PRIM_3_SEED_5000)

        solution = solve_maze(maze)
        self.assertEqual(solution.length, 12)
        self.assertEqual(solution.path[:6], [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (3, 2)])


class GridGeneratorTests(unittest.TestCase):
    def test_every_algorithm_carves_a_spanning_tree(self) -> None:
        for algorithm in ALGORITHM_IDS:
            for seed in range(20):
                maze = generate_maze("6-8", seed, algorithm)
                report = is_perfect_maze(maze)
                self.assertTrue(report.is_perfect, f"{algorithm} seed {seed}")
                self.assertEqual(report.total_cells, 14 * 10)
                self.assertEqual(count_open_passages(maze.grid), 14 * 10 - 1)
                self.assertTrue(validate_maze(maze))
                self.assertTrue(all(cell.visited for cell in maze.grid.iter_cells()))

    def test_same_seed_same_maze(self) -> None:
        for algorithm in ALGORITHM_IDS:
            first = generate_maze("12-14", 2024, algorithm)
            second = generate_maze("12-14", 2024, algorithm)
            self.assertEqual(first.grid.wall_signature(), second.grid.wall_signature())
            self.assertEqual(solve_maze(first).path, solve_maze(second).path)

    def test_different_seeds_differ(self) -> None:
        for algorithm in ALGORITHM_IDS:
            first = generate_maze("9-11", 1, algorithm)
            second = generate_maze("9-11", 2, algorithm)
            self.assertNotEqual(first.grid.wall_signature(), second.grid.wall_signature())

    def test_algorithms_differ_for_same_seed(self) -> None:
        showcase = generate_algorithm_showcase("9-11", 77)
        self.assertEqual([maze.algorithm for maze in showcase], list(ALGORITHM_IDS))
        self.assertEqual(len({maze.seed for maze in showcase}), 1)
        signatures = {tuple(maze.grid.wall_signature()) for maze in showcase}
        self.assertEqual(len(signatures), 3)

    def test_preset_algorithm_is_default(self) -> None:
        self.assertEqual(generate_maze("3", 1).algorithm, ALGORITHMS.RECURSIVE_BACKTRACKER)
        self.assertEqual(generate_maze("9-11", 1).algorithm, ALGORITHMS.PRIM)
        generator = GridMazeGenerator(age_range="9-11", algorithm=ALGORITHMS.KRUSKAL)
        self.assertEqual(generator.create_maze(seed=1).algorithm, ALGORITHMS.KRUSKAL)

    def test_unknown_age_range_uses_default_preset(self) -> None:
        maze = generate_maze("99", 3)
        self.assertEqual((maze.rows, maze.cols), (18, 12))

    def test_unknown_algorithm_is_rejected(self) -> None:
        with self.assertRaises(KeyError):
            get_grid_algorithm("eller")
        with self.assertRaises(KeyError):
            carve_grid(3, 3, "eller", 1)
        with self.assertRaises(KeyError):
            GridMazeGenerator(algorithm="eller")

    def test_single_cell_grid(self) -> None:
        for algorithm in ALGORITHM_IDS:
            grid = carve_grid(1, 1, algorithm, 9)
            self.assertEqual(solve_maze(grid).path, [(0, 0)])

    def test_record_serialization(self) -> None:
        data = generate_maze("3", 5000, ALGORITHMS.PRIM).to_dict()
        self.assertEqual(data["layout"], "grid")
        self.assertEqual(data["seed"], 5000)
        self.assertEqual(data["ageRange"], "3")
        self.assertEqual(data["algorithm"], "prim")
        self.assertEqual(data["walls"], PRIM_3_SEED_5000)
        self.assertEqual(data["preset"]["gridWidth"], 6)


class GridBatchTests(unittest.TestCase):
    def test_batch_seeds_are_consecutive(self) -> None:
        batch = generate_mazes("3", 3, base_seed=5000)
        self.assertEqual([maze.seed for maze in batch.mazes], [5000, 5001, 5002])
        self.assertEqual(batch.seeds, [5000, 5001, 5002])
        for maze in batch.mazes:
            self.assertEqual(maze.grid.wall_signature(), generate_maze("3", maze.seed).grid.wall_signature())

    def test_batch_quantity_is_bounded(self) -> None:
        with self.assertRaises(ValueError):
            generate_mazes("3", 0, base_seed=1)
        with self.assertRaises(ValueError):
            generate_mazes("3", 11, base_seed=1)

    def test_batch_without_seed_draws_one(self) -> None:
        batch = generate_mazes("4-5", 2)
        self.assertEqual(batch.mazes[1].seed, batch.base_seed + 1)

    def test_randomized_algorithms_for_older_ages(self) -> None:
        batch = generate_mazes("12-14", 6, base_seed=300, randomize_algorithms=True)
        self.assertEqual(batch.mazes[0].algorithm, ALGORITHMS.PRIM)
        for maze in batch.mazes:
            self.assertIn(maze.algorithm, ALGORITHM_IDS)
            self.assertTrue(validate_maze(maze))
        again = generate_mazes("12-14", 6, base_seed=300, randomize_algorithms=True)
        self.assertEqual([m.algorithm for m in batch.mazes], [m.algorithm for m in again.mazes])

    def test_randomize_ignored_for_young_ages(self) -> None:
        batch = generate_mazes("4-5", 4, base_seed=10, randomize_algorithms=True)
        self.assertEqual({maze.algorithm for maze in batch.mazes}, {ALGORITHMS.RECURSIVE_BACKTRACKER})

    def test_batch_to_dict(self) -> None:
        data = generate_mazes("3", 2, base_seed=7).to_dict()
        self.assertEqual(data["baseSeed"], 7)
        self.assertEqual(data["quantity"], 2)
        self.assertEqual([maze["seed"] for maze in data["mazes"]], [7, 8])


if __name__ == "__main__":
    unittest.main()
