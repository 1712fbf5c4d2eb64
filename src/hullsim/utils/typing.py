import numpy as np
import numbers
from enum import Enum
from typing import Type


# API functions

def sanitize_type(obj, dtype, name):
    """
    raise TypeError unless `obj` matches `dtype` (a type, a dtype name, or a tuple of either)
    """
    if isinstance(dtype, (tuple, list)):
        if not any(is_dtype(obj, dt) for dt in dtype):
            raise TypeError(f"'{name}' expected type one of {dtype}. Got: '{type(obj)}'")
    elif not is_dtype(obj, dtype):
        raise TypeError(f"'{name}' expected type: '{dtype}'. Got: '{type(obj)}'")
    return True


def sanitize_range(obj, name, lt=None, le=None, ge=None, gt=None):
    """
    raise ValueError unless `obj` satisfies every bound given
    """
    bounds = (
        (lt, lambda b: obj < b, "less than"),
        (le, lambda b: obj <= b, "less than or equal to"),
        (ge, lambda b: obj >= b, "greater than or equal to"),
        (gt, lambda b: obj > b, "greater than"),
    )
    for bound, holds, text in bounds:
        if bound is not None and not holds(bound):
            raise ValueError(f"'{name}' should be {text} {bound}. Got: {obj}")
    return True


def sanitize_choice(obj, choices: Type[Enum], name):
    """
    resolve an enum member from either the member itself or its value
    """
    if isinstance(obj, choices):
        return obj
    sanitize_type(obj, str, name)
    try:
        return choices(obj.lower())
    except ValueError:
        raise ValueError(
            f"'{name}' expected one of {tuple(c.value for c in choices)}. Got: '{obj}'"
        ) from None


def sanitize_points(obj, name, dtype=np.float64):
    """
    Validate a planar point set and return it as an (n, 2) array of `dtype`.

    Accepts anything array-like whose elements are (x, y) pairs: lists of
    tuples, numpy arrays, sequences of Points. Empty point sets are rejected,
    there is no hull of nothing.
    """
    if not is_array_like(obj):
        raise TypeError(f"'{name}' expected array-like of (x, y) pairs. Got: {type(obj)}")
    if len(obj) == 0:
        raise ValueError(f"'{name}' must contain at least one point")
    if isinstance(obj, np.ndarray):
        if obj.ndim != 2 or obj.shape[1] != 2:
            raise ValueError(f"'{name}' expected shape (n, 2). Got: {obj.shape}")
        if obj.dtype.kind not in "iuf":
            raise TypeError(f"'{name}' expected numeric dtype. Got: {obj.dtype}")
        if not np.isfinite(obj).all():
            raise ValueError(f"'{name}' expected finite coordinates")
        return obj.astype(np.float64).astype(dtype)
    for i, pair in enumerate(obj):
        if not is_array_like(pair) or len(pair) != 2:
            raise ValueError(f"'{name}[{i}]' expected an (x, y) pair. Got: {pair!r}")
        if not array_dtype_is(pair, "numeric"):
            raise TypeError(f"'{name}[{i}]' expected numeric coordinates. Got: {pair!r}")
        if not array_dtype_is(pair, "finite"):
            raise ValueError(f"'{name}[{i}]' expected finite coordinates. Got: {pair!r}")
    return np.asarray(obj, dtype=np.float64).astype(dtype).reshape(len(obj), 2)


def is_dtype(obj, dtype):
    if isinstance(dtype, type):
        return isinstance(obj, dtype)
    if dtype not in func_dict:
        raise NotImplementedError(f"string dtype: {dtype} not Implemented. Supported: {tuple(func_dict)}")
    return func_dict[dtype](obj)


def is_none(obj):
    return obj is None


def is_boolean(obj):
    return isinstance(obj, (bool, np.bool_))


def is_numeric(obj):
    """
    python or numpy number, booleans excluded
    """
    return isinstance(obj, numbers.Number) and not is_boolean(obj)


def is_integer(obj):
    """
    python or numpy integer, booleans excluded
    """
    return isinstance(obj, numbers.Integral) and not is_boolean(obj)


def is_finite(obj):
    """
    numeric (or boolean) and neither nan nor infinite
    """
    if not (is_numeric(obj) or is_boolean(obj)):
        return False
    return bool(np.isfinite(obj))


def is_array_like(obj):
    """
    sized, iterable and indexable, but not a string or a mapping
    """
    if isinstance(obj, (str, dict)):
        return False
    return all(hasattr(obj, attr) for attr in ("__len__", "__iter__", "__getitem__"))


def array_dtype_is(obj, dtype: str | Type):
    """
    whether every element of an array-like matches `dtype`; vacuously true when empty
    """
    if not is_array_like(obj):
        raise TypeError(f"'obj' must be array-like. Supplied a {type(obj)}")
    if isinstance(dtype, str):
        dtype = dtype.lower()
        if dtype not in func_dict:
            raise ValueError(
                f"'dtype' expects a type or a string. Supported string dtypes: "
                f"{tuple(func_dict)}. Supplied: '{dtype}'"
            )
        return all(func_dict[dtype](element) for element in obj)
    if not isinstance(dtype, type):
        raise TypeError(f"'dtype' must be a string or a type. Supplied a {type(dtype)}.")
    return all(isinstance(element, dtype) for element in obj)


func_dict = {
    "numeric": is_numeric,
    "integer": is_integer,
    "finite": is_finite,
    "boolean": is_boolean,
    "none": is_none,
}
