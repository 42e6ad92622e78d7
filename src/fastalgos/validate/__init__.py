"""
Output checks shared by the tests and the benchmark runner.

`oracle` compares against Python's `sorted`; `properties` holds
comparator-aware order checks, multiset equality and a stability check.
"""

from .oracle import ORACLE_NAME, equals_oracle, oracle_sort
from .properties import (
    assert_no_mutation,
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    is_stable,
    permutation_counter_diff,
)

__all__ = [
    # oracle
    "ORACLE_NAME", "equals_oracle", "oracle_sort",
    # properties
    "assert_no_mutation", "first_nondecreasing_violation_index", "is_nondecreasing",
    "is_permutation", "is_stable", "permutation_counter_diff",
]
