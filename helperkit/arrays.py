"""Helpers for dicts, lists and lists of records.

Everything here returns a new container, except unset_by_value() which
removes entries in place.
"""
from collections.abc import Callable, Iterable, Mapping, MutableMapping, MutableSequence, Sequence
from functools import cmp_to_key
from typing import Any

from loguru import logger

from helperkit.equality import is_empty, loose_equals, strict_equals
from helperkit.exceptions import ConfigurationError


Comparator = Callable[[Mapping[Any, Any], Mapping[Any, Any]], int]


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _as_key_set(keys: Any) -> set[Any]:
    """Treat a single key (a string included) as a one-element set."""
    if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
        return {keys}
    return set(keys)


def clear(
    dirty: Mapping[Any, Any] | Sequence[Any],
    reindex: bool = True,
    is_empty_predicate: Callable[[Any], bool] | None = None,
) -> dict[Any, Any] | list[Any]:
    """Remove every empty value.

    Args:
        dirty: Dict or list to filter. It is not modified.
        reindex: Renumber integer keys from 0 in the order they survive.
            String keys are kept either way.
        is_empty_predicate: Replaces the default emptiness check entirely.
            Entries for which it returns True are dropped.

    Returns:
        For a dict, a new dict. For a list, a new list when reindexing, or a
        dict of surviving index -> value otherwise.
    """
    check = is_empty_predicate or is_empty
    items = enumerate(dirty) if _is_list(dirty) else dirty.items()
    kept = [(key, value) for key, value in items if not check(value)]

    if _is_list(dirty) and reindex:
        return [value for _, value in kept]

    if not reindex:
        return dict(kept)

    result: dict[Any, Any] = {}
    position = 0
    for key, value in kept:
        if _is_index(key):
            result[position] = value
            position += 1
        else:
            result[key] = value
    return result


def whitelist(crowded: Mapping[Any, Any], keys: Any) -> dict[Any, Any]:
    """Keep only the entries whose key is in keys.

    Args:
        crowded: Dict to filter. It is not modified.
        keys: One key, or an iterable of keys. Strings and bytes count as a
            single key; any other iterable, a tuple included, is read as a
            collection of keys, so a tuple key must be wrapped, e.g. [(1, 2)].
            Every key must be hashable or TypeError is raised.
    """
    allowed = _as_key_set(keys)
    return {key: value for key, value in crowded.items() if key in allowed}


def blacklist(messy: Mapping[Any, Any], keys: Any) -> dict[Any, Any]:
    """Drop the entries whose key is in keys, keeping the rest in order.

    Args:
        messy: Dict to filter. It is not modified.
        keys: One key, or an iterable of keys. Strings and bytes count as a
            single key; any other iterable, a tuple included, is read as a
            collection of keys, so a tuple key must be wrapped, e.g. [(1, 2)].
            Every key must be hashable or TypeError is raised.
    """
    denied = _as_key_set(keys)
    return {key: value for key, value in messy.items() if key not in denied}


def _require_key(key: Any) -> None:
    if key is None or key == "":
        logger.debug("Comparison key is empty", key=key)
        raise ConfigurationError("A comparison key is required to compare records")


def compare(a: Mapping[Any, Any], b: Mapping[Any, Any], key: Any) -> int:
    """Compare two records on one of their keys.

    Args:
        a: First record.
        b: Second record.
        key: The key whose values are compared.

    Returns:
        -1, 0 or 1 as a[key] is lower than, equal to or greater than b[key].

    Raises:
        ConfigurationError: If key is None or an empty string.
    """
    _require_key(key)
    left, right = a[key], b[key]
    if left == right:
        return 0
    return -1 if left < right else 1


def make_comparator(key: Any) -> Comparator:
    """Build a two-argument comparator bound to key.

    The result works with functools.cmp_to_key, so different sorts can use
    different keys at the same time.

    Example:
        >>> animals = [{"id": 2, "name": "Zebra"}, {"id": 3, "name": "Dog"}]
        >>> sorted(animals, key=cmp_to_key(make_comparator("name")))[0]["name"]
        'Dog'

    Raises:
        ConfigurationError: If key is None or an empty string.
    """
    _require_key(key)

    def comparator(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> int:
        return compare(a, b, key)

    return comparator


def sort_by_key(
    records: Mapping[Any, Mapping[Any, Any]] | Sequence[Mapping[Any, Any]],
    key: Any,
    reverse: bool = False,
) -> dict[Any, Mapping[Any, Any]] | list[Mapping[Any, Any]]:
    """Sort records by the value they hold under key.

    A list comes back as a new sorted list. A dict comes back as a new dict
    ordered by its values, with the original keys kept.
    """
    sort_key = cmp_to_key(make_comparator(key))
    if _is_list(records):
        return sorted(records, key=sort_key, reverse=reverse)
    ordered = sorted(records.items(), key=lambda item: sort_key(item[1]), reverse=reverse)
    return dict(ordered)


def unset_by_value(
    array: MutableMapping[Any, Any] | MutableSequence[Any],
    value: Any,
    strict: bool = False,
) -> None:
    """Remove every entry equal to value, in place.

    Remaining dict entries keep their keys.

    Args:
        array: Dict or list to modify.
        value: Value to remove, every occurrence of it.
        strict: Require the same type as well as the same value. By default
            values of different types may match, e.g. "2" and 2.
    """
    equals = strict_equals if strict else loose_equals
    if isinstance(array, MutableMapping):
        for key in [k for k, v in array.items() if equals(v, value)]:
            del array[key]
    else:
        for index in reversed(range(len(array))):
            if equals(array[index], value):
                del array[index]
