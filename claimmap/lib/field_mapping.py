from typing import Any, List, Mapping, Optional
from decimal import Decimal, ROUND_HALF_UP, localcontext
import collections.abc as cabc

from .errors import FieldPathError
from .naming import to_snake_case

# Marks "no value here" as opposed to a key whose value is None.
_MISSING = object()


def get_mapping_field(mapping: Optional[Mapping[str, str]], name: str) -> str:
    """
    Path configured for a logical field name, or its snake_case default.
    An empty string in the table counts as not configured.
    """
    if mapping:
        configured = mapping.get(name)
        if configured:
            return configured
    return to_snake_case(name)


def _split_path(p: Any) -> List[str]:
    if not isinstance(p, str) or not p:
        raise FieldPathError(f"invalid field path: {p!r}")
    toks = p.split(".")
    if any(t == "" for t in toks):
        raise FieldPathError(f"empty segment in field path: {p!r}")
    return toks


def _lookup(obj: Any, path: str) -> Any:
    if obj is None:
        raise FieldPathError(f"cannot resolve {path!r} on a None object")
    cur = obj
    for t in _split_path(path):
        if not isinstance(cur, cabc.Mapping) or t not in cur:
            return _MISSING
        cur = cur[t]
    return cur


def _round_to_int_str(v: Any) -> Optional[str]:
    d = v if isinstance(v, Decimal) else Decimal(v)
    if not d.is_finite():
        return None
    # half away from zero; int() drops the sign of -0
    with localcontext() as ctx:
        # room for every integer digit, 1e300 included
        ctx.prec = max(ctx.prec, d.adjusted() + 2)
        return str(int(d.quantize(Decimal(1), rounding=ROUND_HALF_UP)))


def get_boolean_field_by_path(obj: Any, path: str, fallback: bool) -> bool:
    v = _lookup(obj, path)
    if type(v) is bool:
        return v
    return fallback


def get_string_field_by_path(obj: Any, path: str, fallback: str) -> str:
    """
    Read a string-ish value at `path`.

    - missing path / non-mapping hop -> fallback
    - null leaf                      -> ""
    - str                            -> as is
    - int                            -> decimal digits
    - float / Decimal                -> rounded to a whole number (95.7 -> "96")
    - anything else (bool, dict...)  -> fallback
    """
    v = _lookup(obj, path)
    if v is _MISSING:
        return fallback
    if v is None:
        return ""
    if isinstance(v, str):
        return v
    if isinstance(v, bool):
        return fallback
    if isinstance(v, int):
        return str(v)
    if isinstance(v, (float, Decimal)):
        s = _round_to_int_str(v)
        return fallback if s is None else s
    return fallback
