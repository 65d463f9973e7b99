"""Strict and loose value comparison.

Loose comparison lets values of different types match when they represent the
same thing, e.g. ``"2"`` and ``2``, ``None`` and ``""``, ``"1e1"`` and ``10``.
Strict comparison requires the same type as well as the same value.
"""
import re
from collections.abc import Mapping, Sequence, Sized
from numbers import Number
from typing import Any


_NUMERIC_STRING = re.compile(
    r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$"
)


def is_empty(value: Any) -> bool:
    """Return True for None, False, numeric zero and zero-length str, bytes or collections.

    Anything else counts as filled, including the string ``"0"``.
    """
    if value is None or value is False:
        return True
    if _is_number(value):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_numeric_string(value: Any) -> bool:
    return isinstance(value, str) and _NUMERIC_STRING.match(value) is not None


def _truthy(value: Any) -> bool:
    return not is_empty(value)


def _as_bool(value: Any) -> bool:
    # "0" converts to False, unlike is_empty
    if isinstance(value, str) and value == "0":
        return False
    return _truthy(value)


def strict_equals(a: Any, b: Any) -> bool:
    """Return True when a and b have the same type and the same value.

    Mappings must hold the same keys in the same order; containers are
    compared strictly item by item.
    """
    if type(a) is not type(b):
        return False
    if isinstance(a, Mapping):
        if list(a.keys()) != list(b.keys()):
            return False
        return all(strict_equals(a[k], b[k]) for k in a)
    if _is_list(a):
        return len(a) == len(b) and all(strict_equals(x, y) for x, y in zip(a, b))
    return bool(a == b)


def loose_equals(a: Any, b: Any) -> bool:
    """Return True when a and b are equal after type juggling.

    Rules, checked in order:

    - either side is a bool: both sides are converted to bool, with "0"
      counting as False;
    - either side is None: the other side must be empty;
    - number against string: numeric comparison when the string is numeric,
      otherwise the number is compared as its string form;
    - two numeric strings: numeric comparison;
    - mappings: same keys with loosely equal values;
    - sequences: same length with loosely equal items;
    - anything else: plain ``==``.
    """
    if isinstance(a, bool) or isinstance(b, bool):
        return _as_bool(a) == _as_bool(b)
    if a is None or b is None:
        return not _truthy(b if a is None else a)

    if _is_number(a) and isinstance(b, str):
        a, b = b, a
    if isinstance(a, str) and _is_number(b):
        if _is_numeric_string(a):
            return float(a) == b
        return a == str(b)
    if _is_numeric_string(a) and _is_numeric_string(b):
        return float(a) == float(b)

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        if a.keys() != b.keys():
            return False
        return all(loose_equals(a[k], b[k]) for k in a)
    if _is_list(a) and _is_list(b):
        return len(a) == len(b) and all(loose_equals(x, y) for x, y in zip(a, b))
    return bool(a == b)
