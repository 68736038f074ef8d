"""
Building blocks for AWS query-protocol arguments.

Every ``add_*`` helper returns a function that takes the current list of
query arguments and returns a new list with its own entries placed ahead
of the existing ones. Helpers can be chained with :py:func:`pipe`.
"""

import urllib.parse
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

QueryArg = Tuple[str, str]
QueryArgList = List[QueryArg]
QueryArgsFn = Callable[[QueryArgList], QueryArgList]


def uri(value: str) -> str:
    """
    Percent-encode everything except RFC 3986 unreserved characters.

    Unlike ``encodeURIComponent``, ``! * ' ( )`` are escaped too.
    """
    return urllib.parse.quote(value, safe="")


def boolean(value: bool) -> str:
    return "true" if value else "false"


def unchanged_query_args(args: QueryArgList) -> QueryArgList:
    return args


def add_one(
    transform: Callable[[Any], str],
    key: str,
    value: Any,
) -> QueryArgsFn:
    def step(args: QueryArgList) -> QueryArgList:
        return [(key, transform(value))] + args

    return step


def add_dict(
    to_string: Callable[[Any], str],
    key: str,
    mapping: Mapping[str, Any],
) -> QueryArgsFn:
    """
    Add one argument per mapping entry, keyed by the entry's own key.

    Entries are visited in sorted key order and each is placed ahead of
    the previous one, so the last key ends up first. ``key`` is unused.
    """

    def step(args: QueryArgList) -> QueryArgList:
        result = args
        for k in sorted(mapping):
            result = add_one(to_string, k, mapping[k])(result)
        return result

    return step


def list_item_key(flattened: bool, index: int, base: str, key: str) -> str:
    """
    Name an argument belonging to the list item at 1-based ``index``.

    >>> list_item_key(False, 2, "Items", "Name")
    'Items.member.2.Name'
    >>> list_item_key(True, 1, "Items", "")
    'Items.1'
    """
    sep = "." if flattened else ".member."
    segment = f"{base}{sep}{index}"
    if key == "":
        return segment
    return f"{segment}.{key}"


def add_list(
    flattened: bool,
    transform: Callable[[Any, QueryArgList], QueryArgList],
    base: str,
    values: Sequence[Any],
) -> QueryArgsFn:
    def step(args: QueryArgList) -> QueryArgList:
        batch: QueryArgList = []
        for i, item in enumerate(values, start=1):
            batch.extend(
                (list_item_key(flattened, i, base, k), v)
                for k, v in transform(item, [])
            )
        return batch + args

    return step


def add_record(
    transform: Callable[[Any], QueryArgList],
    base: str,
    record: Any,
) -> QueryArgsFn:
    def step(args: QueryArgList) -> QueryArgList:
        if base == "":
            batch = list(transform(record))
        else:
            batch = [(f"{base}.{k}", v) for k, v in transform(record)]
        return batch + args

    return step


def optional_member(
    encode: Callable[[Any], Any],
    member: Tuple[str, Optional[Any]],
) -> Callable[[List[Tuple[str, Any]]], List[Tuple[str, Any]]]:
    """
    Add ``(key, encode(value))`` unless the value is ``None``.
    """
    key, value = member

    def step(args: List[Tuple[str, Any]]) -> List[Tuple[str, Any]]:
        if value is None:
            return args
        return [(key, encode(value))] + args

    return step


def pipe(*steps: QueryArgsFn) -> QueryArgsFn:
    def run(args: QueryArgList) -> QueryArgList:
        for s in steps:
            args = s(args)
        return args

    return run


def query_string(args: QueryArgList) -> str:
    return "&".join(f"{uri(k)}={uri(v)}" for k, v in args)


def canonical_query_string(args: QueryArgList) -> str:
    """
    Render arguments sorted by encoded key, then encoded value.

    This is the form hashed by AWS Signature Version 4.
    """
    encoded = sorted((uri(k), uri(v)) for k, v in args)
    return "&".join(f"{k}={v}" for k, v in encoded)

