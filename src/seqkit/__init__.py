"""
seqkit - Pure utility functions over ordinary Python sequences.

seqkit provides order-preserving set algebra, insertion-index search for
ascending or descending sequences, stable comparator sorting, and zipping
helpers that make ragged inputs explicit. Every function returns a new
value and leaves its inputs untouched.
"""

import logging

from seqkit.builders import (
    initialize_2d,
    range_inclusive,
    range_inclusive_right,
    repeat_value,
)
from seqkit.config import SeqkitConfig, configure, get_config, override, reset_config
from seqkit.errors import ConfigurationError, InvalidArgumentError, SeqkitError
from seqkit.filtering import (
    compact,
    every_nth,
    filter_falsy,
    find_last,
    find_last_index,
    index_of_all,
    pull,
    pull_at_index,
    pull_at_value,
    pull_by,
    reduced_filter,
    reject,
    remove,
    without,
)
from seqkit.grouping import (
    bifurcate,
    bifurcate_by,
    chunk,
    count_by,
    count_occurrences,
    group_by,
    join,
    longest_item,
    map_object,
    partition,
    reduce_successive,
)
from seqkit.ordering import (
    max_n,
    min_n,
    reduce_which,
    sorted_direction,
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
    stable_sort,
)
from seqkit.predicates import all_equal, all_of, any_of, none_of
from seqkit.sets import (
    difference,
    difference_by,
    difference_with,
    filter_non_unique,
    filter_non_unique_by,
    intersection,
    intersection_by,
    intersection_with,
    similarity,
    symmetric_difference,
    symmetric_difference_by,
    symmetric_difference_with,
    union,
    union_by,
    union_with,
    unique,
    unique_by,
    unique_by_right,
    unique_symmetric_difference,
)
from seqkit.zipping import (
    ABSENT,
    Absent,
    cartesian_product,
    unzip,
    unzip_with,
    x_prod,
    zip,
    zip_object,
    zip_with,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    # Set algebra
    "difference",
    "difference_by",
    "difference_with",
    "intersection",
    "intersection_by",
    "intersection_with",
    "similarity",
    "union",
    "union_by",
    "union_with",
    "symmetric_difference",
    "symmetric_difference_by",
    "symmetric_difference_with",
    "unique_symmetric_difference",
    "unique",
    "unique_by",
    "unique_by_right",
    "filter_non_unique",
    "filter_non_unique_by",
    # Ordering
    "sorted_index",
    "sorted_index_by",
    "sorted_last_index",
    "sorted_last_index_by",
    "stable_sort",
    "sorted_direction",
    "max_n",
    "min_n",
    "reduce_which",
    # Zipping
    "ABSENT",
    "Absent",
    "zip",
    "zip_with",
    "unzip",
    "unzip_with",
    "cartesian_product",
    "x_prod",
    "zip_object",
    # Filtering
    "compact",
    "filter_falsy",
    "reject",
    "remove",
    "without",
    "pull",
    "pull_at_index",
    "pull_at_value",
    "pull_by",
    "every_nth",
    "find_last",
    "find_last_index",
    "index_of_all",
    "reduced_filter",
    # Grouping
    "group_by",
    "count_by",
    "count_occurrences",
    "bifurcate",
    "bifurcate_by",
    "partition",
    "chunk",
    "map_object",
    "reduce_successive",
    "longest_item",
    "join",
    # Predicates
    "all_of",
    "any_of",
    "none_of",
    "all_equal",
    # Builders
    "initialize_2d",
    "range_inclusive",
    "range_inclusive_right",
    "repeat_value",
    # Configuration
    "SeqkitConfig",
    "get_config",
    "configure",
    "reset_config",
    "override",
    # Errors
    "SeqkitError",
    "InvalidArgumentError",
    "ConfigurationError",
]
