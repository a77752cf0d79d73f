"""Registry of operations by their published names and their documented examples."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Final

from .aggregate import calculate_balance, get_average, get_falsy_values_count, get_max_items, sum_arrays
from .construct import create_n_dimensional_array, generate_odds, get_identity_matrix, get_interval_array
from .errors import InvalidArgumentError
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
from .values import UNDEFINED


TASKS: Final[dict[str, Callable[..., object]]] = {
    "getIntervalArray": get_interval_array,
    "sumArrays": sum_arrays,
    "findElement": find_element,
    "findAllOccurrences": find_all_occurrences,
    "removeFalsyValues": remove_falsy_values,
    "getStringsLength": get_strings_length,
    "getAverage": get_average,
    "isSameLength": is_same_length,
    "isValueEqualsIndex": is_value_equals_index,
    "insertItem": insert_item,
    "getHead": get_head,
    "getTail": get_tail,
    "doubleArray": double_array,
    "toStringList": to_string_list,
    "distinct": distinct,
    "createNDimensionalArray": create_n_dimensional_array,
    "flattenArray": flatten_array,
    "selectMany": select_many,
    "calculateBalance": calculate_balance,
    "createChunks": create_chunks,
    "generateOdds": generate_odds,
    "getElementByIndices": get_element_by_indices,
    "getFalsyValuesCount": get_falsy_values_count,
    "getIdentityMatrix": get_identity_matrix,
    "getIndicesOfOddNumbers": get_indices_of_odd_numbers,
    "getHexRGBValues": get_hex_rgb_values,
    "getMaxItems": get_max_items,
    "findCommonElements": find_common_elements,
    "findLongestIncreasingSubsequence": find_longest_increasing_subsequence,
    "propagateItemsByPositionIndex": propagate_items_by_position_index,
    "shiftArray": shift_array,
    "sortDigitNamesByNumericOrder": sort_digit_names_by_numeric_order,
    "swapHeadAndTail": swap_head_and_tail,
}


def get_task(name: str) -> Callable[..., object]:
    """Look up an operation by its published camelCase name or its Python name."""
    if name in TASKS:
        return TASKS[name]
    for func in TASKS.values():
        if func.__name__ == name:
            return func
    raise InvalidArgumentError(f"unknown task {name!r}")


@dataclass(frozen=True)
class CatalogCase:
    id: str
    task: str
    args: tuple[object, ...]
    expected: object
    note: str = field(default="")

    def run(self) -> object:
        return TASKS[self.task](*self.args)


_NAN: Final[float] = math.nan


def _case(task: str, number: int, args: tuple[object, ...], expected: object, note: str = "") -> CatalogCase:
    return CatalogCase(id=f"{task}_{number}", task=task, args=args, expected=expected, note=note)


CATALOG: Final[tuple[CatalogCase, ...]] = (
    _case("getIntervalArray", 1, (1, 5), [1, 2, 3, 4, 5]),
    _case("getIntervalArray", 2, (-2, 2), [-2, -1, 0, 1, 2]),
    _case("getIntervalArray", 3, (0, 100), list(range(101))),
    _case("getIntervalArray", 4, (3, 3), [3], "single-element interval"),
    _case("sumArrays", 1, ([1, 2, 3], [4, 5, 6]), [5, 7, 9]),
    _case("sumArrays", 2, ([10, 20, 30], [5, 10, 15]), [15, 30, 45]),
    _case("sumArrays", 3, ([-1, 0, 1], [1, 2, 3, 4]), [0, 2, 4, 4], "shorter array padded with zero"),
    _case("findElement", 1, (["Ace", 10, True], 10), 1),
    _case("findElement", 2, (["Array", "Number", "string"], "Date"), -1),
    _case("findElement", 3, ([0, 1, 2, 3, 4, 5], 5), 5),
    _case("findAllOccurrences", 1, ([0, 0, 1, 1, 1, 2], 1), 3),
    _case("findAllOccurrences", 2, ([1, 2, 3, 4, 5], 0), 0),
    _case("findAllOccurrences", 3, (["a", "b", "c", "c"], "c"), 2),
    _case("findAllOccurrences", 4, ([None, UNDEFINED, None], None), 2, "None and UNDEFINED differ"),
    _case("findAllOccurrences", 5, ([True, 0, 1, "true"], True), 1, "True does not equal 1"),
    _case("removeFalsyValues", 1, ([0, False, "cat", _NAN, True, ""],), ["cat", True]),
    _case("removeFalsyValues", 2, ([1, 2, 3, 4, 5, "false"],), [1, 2, 3, 4, 5, "false"]),
    _case("removeFalsyValues", 3, ([False, 0, _NAN, "", UNDEFINED],), []),
    _case("getStringsLength", 1, (["", "a", "bc", "def", "ghij"],), [0, 1, 2, 3, 4]),
    _case("getStringsLength", 2, (["angular", "react", "ember"],), [7, 5, 5]),
    _case("getAverage", 1, ([],), 0),
    _case("getAverage", 2, ([1, 2, 3],), 2),
    _case("getAverage", 3, ([-1, 1, -1, 1],), 0),
    _case("getAverage", 4, ([1, 10, 100, 1000],), 277.75),
    _case("getAverage", 5, ([2, 3, 3],), 2.67),
    _case("isSameLength", 1, (["orange", "banana", "cherry"],), True),
    _case("isSameLength", 2, (["cat", "dog", "elephant"],), False),
    _case("isValueEqualsIndex", 1, ([0, 1, 2, 3, 4],), True),
    _case("isValueEqualsIndex", 2, ([2, 1, 0, 4, 5],), True),
    _case("isValueEqualsIndex", 3, ([10, 20, 30, 40, 50],), False),
    _case("insertItem", 1, ([1, 3, 4, 5], 2, 1), [1, 2, 3, 4, 5]),
    _case("insertItem", 2, ([1, "b", "c"], "x", 0), ["x", 1, "b", "c"]),
    _case("getHead", 1, ([1, 3, 4, 5], 2), [1, 3]),
    _case("getHead", 2, (["a", "b", "c", "d"], 3), ["a", "b", "c"]),
    _case("getHead", 3, (["a", "b", "c", "d"], 0), []),
    _case("getTail", 1, ([1, 3, 4, 5], 2), [4, 5]),
    _case("getTail", 2, (["a", "b", "c", "d"], 3), ["b", "c", "d"]),
    _case("getTail", 3, (["a", "b", "c", "d"], 0), []),
    _case("doubleArray", 1, (["Ace", 10, True],), ["Ace", 10, True, "Ace", 10, True]),
    _case("doubleArray", 2, ([0, 1, 2, 3, 4, 5],), [0, 1, 2, 3, 4, 5, 0, 1, 2, 3, 4, 5]),
    _case("doubleArray", 3, ([],), []),
    _case("toStringList", 1, ([0, False, "cat", _NAN, True, ""],), "0,false,cat,NaN,true,"),
    _case("toStringList", 2, ([1, 2, 3, 4, 5],), "1,2,3,4,5"),
    _case("toStringList", 3, (["rock", "paper", "scissors"],), "rock,paper,scissors"),
    _case("distinct", 1, ([1, 2, 3, 3, 2, 1],), [1, 2, 3]),
    _case("distinct", 2, (["a", "a", "a", "a"],), ["a"]),
    _case("distinct", 3, ([1, 1, 2, 2, 3, 3, 4, 4],), [1, 2, 3, 4]),
    _case("distinct", 4, ([],), []),
    _case("createNDimensionalArray", 1, (2, 3), [[0, 0, 0], [0, 0, 0], [0, 0, 0]]),
    _case("createNDimensionalArray", 2, (3, 2), [[[0, 0], [0, 0]], [[0, 0], [0, 0]]]),
    _case(
        "createNDimensionalArray",
        3,
        (4, 2),
        [[[[0, 0], [0, 0]], [[0, 0], [0, 0]]], [[[0, 0], [0, 0]], [[0, 0], [0, 0]]]],
    ),
    _case("createNDimensionalArray", 4, (1, 1), [0]),
    _case("flattenArray", 1, ([1, [2, [3, 4], 5], 6],), [1, 2, 3, 4, 5, 6]),
    _case("flattenArray", 2, (["a", ["b", ["c", "d"], "e"], "f"],), ["a", "b", "c", "d", "e", "f"]),
    _case("flattenArray", 3, ([1, 2, 3, 4],), [1, 2, 3, 4]),
    _case("selectMany", 1, ([[1, 2], [3, 4], [5, 6]], lambda x: x), [1, 2, 3, 4, 5, 6]),
    _case(
        "selectMany",
        2,
        (["one", "two", "three"], list),
        ["o", "n", "e", "t", "w", "o", "t", "h", "r", "e", "e"],
        "selector splits strings into characters",
    ),
    _case("calculateBalance", 1, ([[10, 8], [5, 1]],), 6),
    _case("calculateBalance", 2, ([[10, 8], [1, 5]],), -2),
    _case("calculateBalance", 3, ([],), 0),
    _case("createChunks", 1, ([1, 2, 3, 4, 5, 6, 7], 3), [[1, 2, 3], [4, 5, 6], [7]]),
    _case("createChunks", 2, (["a", "b", "c", "d", "e"], 2), [["a", "b"], ["c", "d"], ["e"]]),
    _case("createChunks", 3, ([10, 20, 30, 40, 50], 1), [[10], [20], [30], [40], [50]]),
    _case("generateOdds", 1, (0,), []),
    _case("generateOdds", 2, (1,), [1]),
    _case("generateOdds", 3, (2,), [1, 3]),
    _case("generateOdds", 4, (5,), [1, 3, 5, 7, 9]),
    _case("getElementByIndices", 1, ([[1, 2], [3, 4], [5, 6]], [0, 0]), 1),
    _case("getElementByIndices", 2, (["one", "two", "three"], [2]), "three"),
    _case("getElementByIndices", 3, ([[[1, 2, 3]]], [0, 0, 1]), 2),
    _case("getFalsyValuesCount", 1, ([],), 0),
    _case("getFalsyValuesCount", 2, ([1, "", 3],), 1),
    _case("getFalsyValuesCount", 3, ([-1, "false", None, 0],), 2),
    _case("getFalsyValuesCount", 4, ([None, UNDEFINED, _NAN, False, 0, ""],), 6),
    _case("getIdentityMatrix", 1, (1,), [[1]]),
    _case("getIdentityMatrix", 2, (2,), [[1, 0], [0, 1]]),
    _case(
        "getIdentityMatrix",
        3,
        (5,),
        [
            [1, 0, 0, 0, 0],
            [0, 1, 0, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 0, 1, 0],
            [0, 0, 0, 0, 1],
        ],
    ),
    _case("getIndicesOfOddNumbers", 1, ([1, 2, 3, 4, 5],), [0, 2, 4]),
    _case("getIndicesOfOddNumbers", 2, ([2, 4, 6, 8, 10],), []),
    _case("getIndicesOfOddNumbers", 3, ([11, 22, 33, 44, 55],), [0, 2, 4]),
    _case("getHexRGBValues", 1, ([0, 255, 16777215],), ["#000000", "#0000FF", "#FFFFFF"]),
    _case("getHexRGBValues", 2, ([],), []),
    _case("getMaxItems", 1, ([], 5), []),
    _case("getMaxItems", 2, ([1, 2], 1), [2]),
    _case("getMaxItems", 3, ([2, 3, 1], 2), [3, 2]),
    _case("getMaxItems", 4, ([10, 2, 7, 5, 3, -5], 3), [10, 7, 5]),
    _case("getMaxItems", 5, ([10, 10, 10, 10], 3), [10, 10, 10]),
    _case("findCommonElements", 1, ([1, 2, 3], [2, 3, 4]), [2, 3]),
    _case("findCommonElements", 2, (["a", "b", "c"], ["b", "c", "d"]), ["b", "c"]),
    _case("findCommonElements", 3, ([1, 2, 3], ["a", "b", "c"]), []),
    _case("findLongestIncreasingSubsequence", 1, ([10, 22, 9, 33, 21, 50, 41, 60, 80],), 3),
    _case("findLongestIncreasingSubsequence", 2, ([3, 10, 2, 1, 20],), 2),
    _case("findLongestIncreasingSubsequence", 3, ([50, 3, 10, 7, 40, 80],), 3),
    _case("propagateItemsByPositionIndex", 1, ([],), []),
    _case("propagateItemsByPositionIndex", 2, ([1],), [1]),
    _case("propagateItemsByPositionIndex", 3, (["a", "b"],), ["a", "b", "b"]),
    _case(
        "propagateItemsByPositionIndex",
        4,
        (["a", "b", "c", None],),
        ["a", "b", "b", "c", "c", "c", None, None, None, None],
    ),
    _case(
        "propagateItemsByPositionIndex",
        5,
        ([1, 2, 3, 4, 5],),
        [1, 2, 2, 3, 3, 3, 4, 4, 4, 4, 5, 5, 5, 5, 5],
    ),
    _case("shiftArray", 1, ([1, 2, 3, 4, 5], 2), [4, 5, 1, 2, 3]),
    _case("shiftArray", 2, (["a", "b", "c", "d"], -1), ["b", "c", "d", "a"]),
    _case("shiftArray", 3, ([10, 20, 30, 40, 50], -3), [40, 50, 10, 20, 30]),
    _case("sortDigitNamesByNumericOrder", 1, ([],), []),
    _case("sortDigitNamesByNumericOrder", 2, (["nine", "one"],), ["one", "nine"]),
    _case("sortDigitNamesByNumericOrder", 3, (["one", "two", "three"],), ["one", "two", "three"]),
    _case(
        "sortDigitNamesByNumericOrder",
        4,
        (["nine", "eight", "nine", "eight"],),
        ["eight", "eight", "nine", "nine"],
    ),
    _case("sortDigitNamesByNumericOrder", 5, (["one", "one", "one", "zero"],), ["zero", "one", "one", "one"]),
    _case("swapHeadAndTail", 1, ([1, 2, 3, 4, 5],), [4, 5, 3, 1, 2]),
    _case("swapHeadAndTail", 2, ([1, 2],), [2, 1]),
    _case("swapHeadAndTail", 3, ([1, 2, 3, 4, 5, 6, 7, 8],), [5, 6, 7, 8, 1, 2, 3, 4]),
    _case("swapHeadAndTail", 4, ([1],), [1]),
    _case("swapHeadAndTail", 5, ([],), []),
)


def cases_for(task: str) -> tuple[CatalogCase, ...]:
    if task not in TASKS:
        raise InvalidArgumentError(f"unknown task {task!r}")
    return tuple(case for case in CATALOG if case.task == task)
