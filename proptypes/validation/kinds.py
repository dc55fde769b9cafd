"""
Runtime kind classification and same-value equality.

Two granularities are used. ``coarse_kind`` drives type matching and
``precise_kind`` is only used to render error messages.
"""
import datetime
import math
import numbers
import re
from collections.abc import Mapping, Sequence
from typing import Any, Iterable, List, Optional

import numpy as np

ANONYMOUS = '<<anonymous>>'

# Class attribute that marks a user-defined type as symbol-like.
SYMBOL_TAG_ATTR = '__to_string_tag__'

PRIMITIVE_KINDS = ('array', 'boolean', 'function', 'number', 'object', 'string', 'symbol')


class _Missing:
    """Sentinel for a key that is absent from its container."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'undefined'

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


class Symbol:
    """
    A unique named token.

    Two symbols are never equal unless they are the same object, even when
    their descriptions match.
    """

    __slots__ = ('description',)

    def __init__(self, description: Optional[str] = None):
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return 'Symbol()'
        return f'Symbol({self.description})'


def is_symbol(value: Any) -> bool:
    """Detect native ``Symbol`` instances and types tagged as symbols."""
    if isinstance(value, Symbol):
        return True
    return getattr(type(value), SYMBOL_TAG_ATTR, None) == 'Symbol'


def is_array_like(value: Any) -> bool:
    """Ordered sequences other than text, plus numpy arrays with at least one dimension."""
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def coarse_kind(value: Any) -> str:
    """
    Classify a value for type matching.

    Returns one of ``array``, ``boolean``, ``function``, ``number``,
    ``object``, ``string``, ``symbol`` or ``undefined``. ``None`` classifies as
    ``object`` and compiled regular expressions as ``object``.
    """
    if value is MISSING:
        return 'undefined'
    if value is None:
        return 'object'
    if isinstance(value, np.ndarray) and value.ndim == 0:
        # 0-d arrays behave like the scalar they hold
        return coarse_kind(value.item())
    # bool before number: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return 'boolean'
    if isinstance(value, (numbers.Number, np.number)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if is_symbol(value):
        return 'symbol'
    if isinstance(value, re.Pattern):
        return 'object'
    if is_array_like(value):
        return 'array'
    if callable(value):
        return 'function'
    return 'object'


def precise_kind(value: Any) -> str:
    """Like ``coarse_kind`` but with ``null``, ``undefined``, ``date`` and ``regexp``."""
    if value is MISSING:
        return 'undefined'
    if value is None:
        return 'null'
    kind = coarse_kind(value)
    if kind == 'object':
        if isinstance(value, (datetime.date, np.datetime64)):
            return 'date'
        if isinstance(value, re.Pattern):
            return 'regexp'
    return kind


def postfix_for_type_warning(value: Any) -> str:
    """Render a kind with its article, e.g. ``an array`` or ``a date``."""
    kind = precise_kind(value)
    if kind in ('array', 'object'):
        return f'an {kind}'
    if kind in ('boolean', 'date', 'regexp'):
        return f'a {kind}'
    return kind


def class_name(value: Any) -> str:
    return getattr(type(value), '__name__', None) or ANONYMOUS


def type_name(cls: Any) -> str:
    return getattr(cls, '__name__', None) or ANONYMOUS


def _is_nan(value: Any) -> bool:
    # NaN is the only number that is unequal to itself
    return bool(value != value)


def same_value(x: Any, y: Any) -> bool:
    """
    Equality that treats NaN as equal to itself and keeps ``0.0`` and ``-0.0`` apart.

    Values of different coarse kinds never match, so ``True`` does not match
    ``1``. Numbers, strings and booleans compare by value. Everything else
    (arrays, objects, functions, symbols) compares by identity.
    """
    if x is y:
        return True
    kind = coarse_kind(x)
    if kind != coarse_kind(y):
        return False
    if kind == 'number':
        x_nan, y_nan = _is_nan(x), _is_nan(y)
        if x_nan or y_nan:
            return x_nan and y_nan
        if not x == y:
            return False
        if x == 0 and isinstance(x, numbers.Real) and isinstance(y, numbers.Real):
            return math.copysign(1.0, x) == math.copysign(1.0, y)
        return True
    if kind in ('string', 'boolean'):
        return bool(x == y)
    return False


def lookup(container: Any, key: Any) -> Any:
    """
    Read ``key`` from a mapping, sequence or plain object.

    Returns ``MISSING`` when the key is not present.
    """
    if isinstance(container, Mapping):
        return container.get(key, MISSING)
    if is_array_like(container):
        if isinstance(key, int) and -len(container) <= key < len(container):
            return container[key]
        return MISSING
    if isinstance(key, str):
        return getattr(container, key, MISSING)
    return MISSING


def own_keys(value: Any) -> List[Any]:
    """Keys a value carries itself: mapping keys or instance attributes."""
    if isinstance(value, Mapping):
        return list(value.keys())
    try:
        return list(vars(value).keys())
    except TypeError:
        # no __dict__ (slots, builtins)
        return []


def to_serializable(value: Any) -> Any:
    """Turn a checked value into something ``json.dumps`` can render."""
    if isinstance(value, Mapping):
        return {str(k): to_serializable(v) for k, v in value.items()}
    if isinstance(value, np.ndarray):
        return value.tolist()
    if is_array_like(value):
        return [to_serializable(v) for v in value]
    if isinstance(value, np.generic):
        return value.item()
    if coarse_kind(value) == 'object' and own_keys(value):
        return {str(k): to_serializable(v) for k, v in vars(value).items()}
    return value


def serialize_values(values: Iterable[Any]) -> List[Any]:
    return [to_serializable(v) for v in values]
