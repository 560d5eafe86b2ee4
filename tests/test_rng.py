import unittest

from mazeworks.rng import create_rng, generate_seed


class SeededRngTests(unittest.TestCase):
    def test_matches_reference_sequence(self) -> None:
        expected = {
            0: [0.26642920868471265, 0.0003297457005828619, 0.2232720274478197],
            1: [0.6270739405881613, 0.002735721180215478, 0.5274470399599522],
            42: [0.6011037519201636, 0.44829055899754167, 0.8524657934904099],
            12345: [0.9797282677609473, 0.3067522644996643, 0.484205421525985],
        }
        for seed, values in expected.items():
            rng = create_rng(seed)
            self.assertEqual([rng.random() for _ in range(3)], values, f"seed {seed}")

    def test_same_seed_same_hundred_draws(self) -> None:
        for seed in (0, 7, 2024, 4294967295):
            first = create_rng(seed)
            second = create_rng(seed)
            self.assertEqual(
                [first.random() for _ in range(100)],
                [second.random() for _ in range(100)],
            )

    def test_different_seeds_diverge(self) -> None:
        first = create_rng(1)
        second = create_rng(2)
        self.assertNotEqual(
            [first.random() for _ in range(10)],
            [second.random() for _ in range(10)],
        )

    def test_negative_seed_wraps_to_32_bits(self) -> None:
        self.assertEqual(create_rng(-5).random(), create_rng(4294967291).random())
        self.assertEqual(create_rng(-5).random(), 0.48384718922898173)

    def test_random_int_is_inclusive_and_matches_reference(self) -> None:
        rng = create_rng(7)
        self.assertEqual([rng.random_int(1, 6) for _ in range(6)], [1, 1, 6, 5, 4, 3])

        rng = create_rng(3)
        draws = [rng.random_int(-2, 2) for _ in range(500)]
        self.assertEqual(set(draws), {-2, -1, 0, 1, 2})

    def test_random_float_is_half_open(self) -> None:
        rng = create_rng(11)
        for _ in range(500):
            value = rng.random_float(2.5, 3.5)
            self.assertGreaterEqual(value, 2.5)
            self.assertLess(value, 3.5)

    def test_shuffle_in_place_matches_reference(self) -> None:
        items = list(range(8))
        result = create_rng(99).shuffle(items)
        self.assertIs(result, items)
        self.assertEqual(items, [1, 4, 7, 0, 6, 3, 5, 2])

    def test_pick_returns_member(self) -> None:
        rng = create_rng(5)
        choices = ["prim", "kruskal", "recursive-backtracker"]
        for _ in range(20):
            self.assertIn(rng.pick(choices), choices)

    def test_state_advances_per_draw(self) -> None:
        rng = create_rng(0)
        self.assertEqual(rng.state, 0)
        rng.random()
        self.assertEqual(rng.state, 0x6D2B79F5)

    def test_generated_seed_fits_32_bits(self) -> None:
        seed = generate_seed()
        self.assertGreaterEqual(seed, 0)
        self.assertLessEqual(seed, 0xFFFFFFFF)


if __name__ == "__main__":
    unittest.main()
