from __future__ import annotations

import importlib.util
import math
import unittest
from unittest import mock


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for JAX array-path tests")
class JaxArrayPathTests(unittest.TestCase):
    def _vec(self, values, dtype=None):
        import jax.numpy as jnp

        return jnp.asarray(values, dtype=dtype)

    def _assert_array(self, got, want) -> None:
        from array_tasks.values import is_array

        self.assertTrue(is_array(got), f"expected a JAX array, got {type(got).__name__}")
        self.assertEqual(got.tolist(), want)

    def test_reordering_operations_return_arrays(self) -> None:
        from array_tasks import distinct, double_array, get_head, get_tail, shift_array, swap_head_and_tail

        data = self._vec([1, 2, 3, 4, 5])
        self._assert_array(shift_array(data, 2), [4, 5, 1, 2, 3])
        self._assert_array(shift_array(data, -7), [3, 4, 5, 1, 2])
        self._assert_array(swap_head_and_tail(data), [4, 5, 3, 1, 2])
        self._assert_array(double_array(self._vec([1, 2])), [1, 2, 1, 2])
        self._assert_array(get_head(data, 2), [1, 2])
        self._assert_array(get_tail(data, 2), [4, 5])
        self._assert_array(get_tail(data, 0), [])
        self._assert_array(distinct(self._vec([3, 1, 3, 2, 1])), [3, 1, 2])

    def test_distinct_collapses_nan_in_arrays(self) -> None:
        from array_tasks import distinct

        out = distinct(self._vec([math.nan, 1.0, math.nan, 1.0]))
        self.assertEqual(out.shape, (2,))
        self.assertTrue(math.isnan(out.tolist()[0]))
        self.assertEqual(out.tolist()[1], 1.0)

    def test_distinct_over_matrix_rows(self) -> None:
        from array_tasks import distinct

        rows = self._vec([[1, 2], [3, 4], [1, 2]])
        self._assert_array(distinct(rows), [[1, 2], [3, 4]])

    def test_filtering_operations(self) -> None:
        from array_tasks import get_falsy_values_count, remove_falsy_values

        floats = self._vec([0.0, 1.5, math.nan, -2.0])
        self._assert_array(remove_falsy_values(floats), [1.5, -2.0])
        self.assertEqual(get_falsy_values_count(floats), 2)

        flags = self._vec([True, False, True])
        self._assert_array(remove_falsy_values(flags), [True, True])
        self.assertEqual(get_falsy_values_count(flags), 1)

    def test_search_operations(self) -> None:
        from array_tasks import (
            find_all_occurrences,
            find_common_elements,
            find_element,
            find_longest_increasing_subsequence,
            get_indices_of_odd_numbers,
            is_value_equals_index,
        )

        data = self._vec([4, 1, 7, 1, -3])
        self.assertEqual(find_element(data, 1), 1)
        self.assertEqual(find_element(data, 9), -1)
        self.assertEqual(find_element(data, True), -1)
        self.assertEqual(find_element(data, "1"), -1)
        self.assertEqual(find_all_occurrences(data, 1), 2)
        self.assertTrue(is_value_equals_index(data))
        self.assertFalse(is_value_equals_index(self._vec([5, 5, 5])))
        self._assert_array(get_indices_of_odd_numbers(data), [1, 2, 3])
        self._assert_array(find_common_elements(self._vec([1, 2, 2, 3]), self._vec([3, 2, 9])), [2, 3])
        self._assert_array(find_common_elements(self._vec([1, 2]), self._vec([], dtype="int32")), [])
        self.assertEqual(find_common_elements(self._vec([1, 2]), [2, "x"]), [2])
        self.assertEqual(find_longest_increasing_subsequence(self._vec([10, 22, 9, 33, 21, 50, 41, 60, 80])), 3)

    def test_bool_arrays_only_match_bools(self) -> None:
        from array_tasks import find_all_occurrences, find_element

        flags = self._vec([False, True, True])
        self.assertEqual(find_element(flags, True), 1)
        self.assertEqual(find_element(flags, 1), -1)
        self.assertEqual(find_all_occurrences(flags, True), 2)

    def test_element_by_indices_on_matrix(self) -> None:
        import jax.numpy as jnp

        from array_tasks import get_element_by_indices

        matrix = jnp.arange(6).reshape(2, 3)
        self.assertEqual(get_element_by_indices(matrix, [1, 2]), 5)
        self.assertIsNone(get_element_by_indices(matrix, [2, 0]))
        self.assertIsNone(get_element_by_indices(matrix, [0, 0, 0]))
        self._assert_array(get_element_by_indices(matrix, [0]), [0, 1, 2])

    def test_reshaping_operations(self) -> None:
        import jax.numpy as jnp

        from array_tasks import create_chunks, flatten_array, insert_item, propagate_items_by_position_index

        self._assert_array(flatten_array(jnp.arange(6).reshape(2, 3)), [0, 1, 2, 3, 4, 5])
        self.assertEqual(flatten_array([1, jnp.asarray([[2, 3], [4, 5]]), [6]]), [1, 2, 3, 4, 5, 6])
        self._assert_array(propagate_items_by_position_index(self._vec([1, 2, 3])), [1, 2, 2, 3, 3, 3])
        self._assert_array(propagate_items_by_position_index(self._vec([], dtype="int32")), [])
        self._assert_array(insert_item(self._vec([1, 3, 4]), 2, 1), [1, 2, 3, 4])
        self._assert_array(insert_item(self._vec([[1, 2]]), [3, 4], 1), [[1, 2], [3, 4]])
        self.assertEqual(insert_item(self._vec([1, 3]), "x", 1), [1, "x", 3])

        chunks = create_chunks(self._vec([1, 2, 3, 4, 5]), 2)
        self.assertIsInstance(chunks, list)
        self.assertEqual([chunk.tolist() for chunk in chunks], [[1, 2], [3, 4], [5]])

    def test_insert_item_rejects_mismatched_row(self) -> None:
        from array_tasks import ArrayShapeError, insert_item

        with self.assertRaises(ArrayShapeError):
            insert_item(self._vec([[1, 2]]), [1, 2, 3], 0)

    def test_numeric_reductions(self) -> None:
        from array_tasks import calculate_balance, get_average, get_max_items, sum_arrays

        self._assert_array(sum_arrays(self._vec([1, 2, 3]), self._vec([1, 2, 3, 4])), [2, 4, 6, 4])
        self._assert_array(sum_arrays(self._vec([1.0, math.nan]), self._vec([2.0])), [3.0, 0.0])
        self.assertEqual(sum_arrays(self._vec([1, 2]), [10]), [11, 2])
        self.assertEqual(get_average(self._vec([2, 3, 3])), 2.67)
        self.assertEqual(get_average(self._vec([], dtype="int32")), 0)
        self.assertEqual(calculate_balance(self._vec([[10, 8], [5, 1]])), 6)
        self._assert_array(get_max_items(self._vec([10, 2, 7, 5, 3, -5]), 3), [10, 7, 5])

    def test_numeric_reductions_do_not_wrap_in_array_dtype(self) -> None:
        from array_tasks import calculate_balance, get_average

        big = self._vec([2**30] * 3, dtype="int32")
        self.assertEqual(get_average(big), get_average([2**30] * 3))
        self.assertEqual(get_average(big), 1073741824.0)
        pairs = self._vec([[2**30, -(2**30)], [2**30, -(2**30)]], dtype="int32")
        self.assertEqual(calculate_balance(pairs), 2**32)

    def test_numeric_reductions_validate_shapes(self) -> None:
        from array_tasks import ArrayShapeError, ArrayTypeError, InvalidArgumentError, calculate_balance, get_max_items

        with self.assertRaises(ArrayShapeError):
            calculate_balance(self._vec([1, 2, 3]))
        with self.assertRaises(ArrayShapeError):
            calculate_balance(self._vec([[1], [2]]))
        with self.assertRaises(ArrayTypeError):
            get_max_items(self._vec([[1, 2]]), 1)
        with self.assertRaises(InvalidArgumentError):
            get_max_items(self._vec([1.0, math.nan]), 1)

    def test_text_operations_accept_numeric_arrays(self) -> None:
        from array_tasks import ArrayTypeError, get_hex_rgb_values, get_strings_length, to_string_list

        self.assertEqual(get_hex_rgb_values(self._vec([0, 255])), ["#000000", "#0000FF"])
        self.assertEqual(to_string_list(self._vec([1, 2, 3])), "1,2,3")
        with self.assertRaises(ArrayTypeError):
            get_strings_length(self._vec([1, 2]))

    def test_scalar_array_is_not_a_sequence(self) -> None:
        from array_tasks import ArrayShapeError, shift_array

        with self.assertRaises(ArrayShapeError):
            shift_array(self._vec(3), 1)

    def test_disabled_fast_path_uses_python_lists(self) -> None:
        from array_tasks import distinct, shift_array
        from array_tasks import values

        data = self._vec([1, 2, 2, 3])
        with mock.patch.object(values, "USE_ARRAY_FAST_PATH", False):
            shifted = shift_array(data, 1)
            unique = distinct(data)
        self.assertEqual(shifted, [3, 1, 2, 2])
        self.assertEqual(unique, [1, 2, 3])


if __name__ == "__main__":
    unittest.main()
