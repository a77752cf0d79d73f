from __future__ import annotations

import importlib.util
import math
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for aggregate tests")
class AggregateTests(unittest.TestCase):
    def test_sum_arrays(self) -> None:
        from array_tasks import sum_arrays

        self.assertEqual(sum_arrays([1, 2, 3], [4, 5, 6]), [5, 7, 9])
        self.assertEqual(sum_arrays([10, 20, 30], [5, 10, 15]), [15, 30, 45])
        self.assertEqual(sum_arrays([-1, 0, 1], [1, 2, 3, 4]), [0, 2, 4, 4])
        self.assertEqual(sum_arrays([1, 2, 3, 4], [-1]), [0, 2, 3, 4])
        self.assertEqual(sum_arrays([], []), [])

    def test_sum_arrays_treats_falsy_elements_as_zero(self) -> None:
        from array_tasks import UNDEFINED, sum_arrays

        self.assertEqual(sum_arrays([1, None], [1]), [2, 0])
        self.assertEqual(sum_arrays([1.5, UNDEFINED], [math.nan, 2]), [1.5, 2])

    def test_sum_arrays_rejects_non_numbers(self) -> None:
        from array_tasks import ArrayTypeError, sum_arrays

        with self.assertRaises(ArrayTypeError):
            sum_arrays(["a"], [1])

    def test_get_average(self) -> None:
        from array_tasks import get_average

        cases = [
            ([], 0),
            ([1, 2, 3], 2),
            ([-1, 1, -1, 1], 0),
            ([1, 10, 100, 1000], 277.75),
            ([2, 3, 3], 2.67),
            ([1, 1, 2], 1.33),
            ([1.125], 1.13),
            ([-2, -3, -3], -2.67),
        ]
        for arr, want in cases:
            with self.subTest(arr=arr):
                self.assertEqual(get_average(arr), want)

    def test_get_average_rejects_non_numbers(self) -> None:
        from array_tasks import ArrayTypeError, InvalidArgumentError, get_average

        with self.assertRaises(ArrayTypeError):
            get_average([1, "2"])
        with self.assertRaises(ArrayTypeError):
            get_average([True, 1])
        with self.assertRaises(InvalidArgumentError):
            get_average([1, math.nan])

    def test_calculate_balance(self) -> None:
        from array_tasks import calculate_balance

        self.assertEqual(calculate_balance([[10, 8], [5, 1]]), 6)
        self.assertEqual(calculate_balance([[10, 8], [1, 5]]), -2)
        self.assertEqual(calculate_balance([]), 0)
        self.assertEqual(calculate_balance([(3, 1), (0.5, 0.25)]), 2.25)

    def test_calculate_balance_rejects_malformed_pairs(self) -> None:
        from array_tasks import ArrayShapeError, ArrayTypeError, calculate_balance

        with self.assertRaises(ArrayShapeError):
            calculate_balance([[1]])
        with self.assertRaises(ArrayShapeError):
            calculate_balance([5])
        with self.assertRaises(ArrayTypeError):
            calculate_balance([["1", 2]])

    def test_get_falsy_values_count(self) -> None:
        from array_tasks import UNDEFINED, get_falsy_values_count

        self.assertEqual(get_falsy_values_count([]), 0)
        self.assertEqual(get_falsy_values_count([1, "", 3]), 1)
        self.assertEqual(get_falsy_values_count([-1, "false", None, 0]), 2)
        self.assertEqual(get_falsy_values_count([None, UNDEFINED, math.nan, False, 0, ""]), 6)

    def test_falsy_count_and_removal_partition_the_input(self) -> None:
        from array_tasks import get_falsy_values_count, remove_falsy_values

        data = [0, 1, "", "a", None, math.nan, False, True, [], 0.0, -3]
        self.assertEqual(get_falsy_values_count(data) + len(remove_falsy_values(data)), len(data))

    def test_get_max_items(self) -> None:
        from array_tasks import get_max_items

        self.assertEqual(get_max_items([], 5), [])
        self.assertEqual(get_max_items([1, 2], 1), [2])
        self.assertEqual(get_max_items([2, 3, 1], 2), [3, 2])
        self.assertEqual(get_max_items([10, 2, 7, 5, 3, -5], 3), [10, 7, 5])
        self.assertEqual(get_max_items([10, 10, 10, 10], 3), [10, 10, 10])
        self.assertEqual(get_max_items([4, 1], 0), [])

    def test_get_max_items_is_stable_and_pure(self) -> None:
        from array_tasks import get_max_items

        source = [1, 1.0, 2]
        out = get_max_items(source, 3)
        self.assertEqual(out, [2, 1, 1.0])
        self.assertIsInstance(out[1], int)
        self.assertIsInstance(out[2], float)
        self.assertEqual(source, [1, 1.0, 2])

    def test_get_max_items_rejects_bad_arguments(self) -> None:
        from array_tasks import ArrayTypeError, InvalidArgumentError, get_max_items

        with self.assertRaises(InvalidArgumentError):
            get_max_items([1, 2], -1)
        with self.assertRaises(ArrayTypeError):
            get_max_items([1, "2"], 1)


if __name__ == "__main__":
    unittest.main()
