"""Collection accessors: lookup, filter and find over maps, sequences and arrays.

- dicts: keyed collections, scanned in ascending key order
- lists: linear sequences, walked from the head
- arrays: random-access sequences with O(1) index lookup
"""

from . import arrays, base, dicts, lists

__all__ = ["arrays", "base", "dicts", "lists"]
