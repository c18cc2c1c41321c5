"""dbquery - composable, read-only queries over immutable in-memory databases.

A query describes how to find a value in an application's state (nested
mappings, sequences, arrays) independently of which state it will run
against. Performing a query never mutates the database and never raises:
the outcome is always a Result.

Quick Start:
    >>> from dbquery import dicts, lists, map2, perform
    >>>
    >>> db = {"users": {1: "Batman", 2: "Spiderman"}, "heroes": ["Batman", "Spiderman"]}
    >>> user = dicts.by_key("missing", lambda db: db["users"], 1)
    >>> perform(user, db)
    Ok('Batman')
    >>> perform(lists.by_index("missing", lambda db: db["heroes"], 2), db)
    Err('missing')

Composition:
    >>> both = map2(lambda a, b: f"{a} & {b}",
    ...             dicts.by_key("missing", lambda db: db["users"], 1),
    ...             dicts.by_key("missing", lambda db: db["users"], 2))
    >>> perform(both, db)
    Ok('Batman & Spiderman')

Error-erased facade (Option instead of Result):
    >>> from dbquery import erased
    >>> erased.perform(erased.dicts.by_key(lambda db: db["users"], 3), db)
    Nothing

Debugging:
    >>> from dbquery import debug, log_sink
    >>> perform(debug(log_sink(), "user", user), db)
    Ok('Batman')
"""

from __future__ import annotations

__version__ = "0.1.0"

# Outcomes & errors
from .foundation.errors import (
    Err,
    ErrorCode,
    Nothing,
    Ok,
    Option,
    QueryError,
    Result,
    Some,
    no_match,
    not_found,
    out_of_range,
)

# Core
from .core import (
    Query,
    and_map,
    and_then,
    combine_array,
    combine_dict,
    combine_list,
    fail,
    fmap,
    from_maybe,
    from_optional,
    from_result,
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
    traverse_array,
    traverse_dict,
    traverse_list,
)

# Accessors
from .accessors import arrays, dicts, lists

# Facade & debug
from . import erased
from .debug import Sink, debug, log_sink

# Configuration & logging
from .foundation.config import DbQuerySettings, clear_settings_cache, get_settings
from .observability import configure_from_settings, configure_logging, get_logger

__all__ = [
    "__version__",
    # Outcomes
    "Result", "Ok", "Err", "Option", "Some", "Nothing",
    # Errors
    "ErrorCode", "QueryError", "not_found", "out_of_range", "no_match",
    # Query core
    "Query", "perform", "succeed", "fail", "identity",
    "fmap", "map_error", "and_then", "or_else", "and_map",
    "map2", "map3", "map4", "map5", "map6", "map7",
    "from_maybe", "from_result", "from_optional",
    # Combine / traverse
    "combine_list", "combine_array", "combine_dict",
    "traverse_list", "traverse_array", "traverse_dict",
    # Accessors
    "dicts", "lists", "arrays",
    # Facade & debug
    "erased", "debug", "log_sink", "Sink",
    # Configuration & logging
    "DbQuerySettings", "get_settings", "clear_settings_cache",
    "configure_logging", "configure_from_settings", "get_logger",
]
