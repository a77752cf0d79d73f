"""array-tasks public API."""

from .aggregate import calculate_balance, get_average, get_falsy_values_count, get_max_items, sum_arrays
from .catalog import CATALOG, TASKS, CatalogCase, get_task
from .construct import create_n_dimensional_array, generate_odds, get_identity_matrix, get_interval_array
from .errors import (
    ArrayShapeError,
    ArrayTasksError,
    ArrayTypeError,
    IndexRangeError,
    InvalidArgumentError,
)
from .search import (
    find_all_occurrences,
    find_common_elements,
    find_element,
    find_longest_increasing_subsequence,
    get_element_by_indices,
    get_indices_of_odd_numbers,
    is_value_equals_index,
)
from .text import get_hex_rgb_values, get_strings_length, is_same_length, sort_digit_names_by_numeric_order, to_string_list
from .transform import (
    create_chunks,
    distinct,
    double_array,
    flatten_array,
    get_head,
    get_tail,
    insert_item,
    propagate_items_by_position_index,
    remove_falsy_values,
    select_many,
    shift_array,
    swap_head_and_tail,
)
from .values import UNDEFINED, is_falsy, strict_equals, value_info

__all__ = [
    "get_interval_array",
    "sum_arrays",
    "find_element",
    "find_all_occurrences",
    "remove_falsy_values",
    "get_strings_length",
    "get_average",
    "is_same_length",
    "is_value_equals_index",
    "insert_item",
    "get_head",
    "get_tail",
    "double_array",
    "to_string_list",
    "distinct",
    "create_n_dimensional_array",
    "flatten_array",
    "select_many",
    "calculate_balance",
    "create_chunks",
    "generate_odds",
    "get_element_by_indices",
    "get_falsy_values_count",
    "get_identity_matrix",
    "get_indices_of_odd_numbers",
    "get_hex_rgb_values",
    "get_max_items",
    "find_common_elements",
    "find_longest_increasing_subsequence",
    "propagate_items_by_position_index",
    "shift_array",
    "sort_digit_names_by_numeric_order",
    "swap_head_and_tail",
    "TASKS",
    "CATALOG",
    "CatalogCase",
    "get_task",
    "UNDEFINED",
    "is_falsy",
    "strict_equals",
    "value_info",
    "ArrayTasksError",
    "InvalidArgumentError",
    "IndexRangeError",
    "ArrayShapeError",
    "ArrayTypeError",
]
