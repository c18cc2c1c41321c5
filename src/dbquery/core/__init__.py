"""Query core: the Query type, its combinators, and the combine/traverse engine."""

from .adapters import from_maybe, from_optional, from_result
from .combine import (
    combine_array,
    combine_dict,
    combine_list,
    traverse_array,
    traverse_dict,
    traverse_list,
)
from .query import (
    Query,
    and_map,
    and_then,
    fail,
    fmap,
    identity,
    map2,
    map3,
    map4,
    map5,
    map6,
    map7,
    map_error,
    or_else,
    perform,
    succeed,
)
from .shapes import INDEXED, KEYED, LINEAR, IndexedShape, KeyedShape, LinearShape, Shape, first_match

__all__ = [
    # Query
    "Query", "perform", "succeed", "fail", "identity",
    "fmap", "map_error", "and_then", "or_else", "and_map",
    "map2", "map3", "map4", "map5", "map6", "map7",
    # Adapters
    "from_maybe", "from_result", "from_optional",
    # Combine / traverse
    "combine_list", "combine_array", "combine_dict",
    "traverse_list", "traverse_array", "traverse_dict",
    # Shapes
    "Shape", "KeyedShape", "LinearShape", "IndexedShape", "KEYED", "LINEAR", "INDEXED", "first_match",
]
