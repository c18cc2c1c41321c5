"""Outcome types and structured errors.

- Result/Ok/Err: outcome of performing a query
- Option/Some/Nothing: presence or absence, used by lookups and the erased facade
- ErrorCode/QueryError: optional structured error payload
"""

from .errors import ErrorCode, QueryError, no_match, not_found, out_of_range
from .option import Nothing, Option, Some
from .result import Err, Ok, Result

__all__ = [
    # Outcomes
    "Result", "Ok", "Err",
    "Option", "Some", "Nothing",
    # Structured errors
    "ErrorCode", "QueryError", "not_found", "out_of_range", "no_match",
]
