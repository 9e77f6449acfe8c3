"""JSON bridge between plain JSON text and behavior-carrying objects

`serialize()` turns an object into JSON built from its own fields.
`revive_with_behavior()` goes the other way: it parses JSON into a plain
property bag and attaches that bag to a class, so the result exposes both the
restored fields and the class's methods.

Functions:
    serialize(obj) -> str
        Compact JSON representation of an object's own fields.
    revive_with_behavior(proto, json_text) -> object
        Instance of `proto` carrying the fields parsed from `json_text`.

Example:
    >>> from katas.models import Rectangle
    >>> serialize(Rectangle(10, 20))
    '{"width":10,"height":20}'
    >>> r = revive_with_behavior(Rectangle, '{"width":10, "height":20}')
    >>> r.area()
    200
"""

import json
import logging
from typing import Any

from katas.exceptions import SerializationError, DeserializationError


logger = logging.getLogger(__name__)


def _own_fields(obj: Any) -> dict[str, Any]:
    try:
        return dict(vars(obj))
    except TypeError:
        raise SerializationError(f'Object of type {type(obj).__name__} has no JSON representation.') from None


def serialize(obj: Any) -> str:
    """Return the compact JSON representation of an object

    JSON-native values (dict, list, str, numbers, bool, None) are dumped as they
    are. Any other object is dumped from its own instance attributes, recursively.

    Args:
        obj (Any): Value to serialize.

    Returns:
        str: JSON text without insignificant whitespace.

    Raises:
        SerializationError:
            If some nested object has neither a JSON form nor instance attributes,
            a dict has keys JSON can not hold, or a container refers to itself.

    Example:
        >>> serialize([1, 2, 3])
        '[1,2,3]'
        >>> serialize({'width': 10, 'height': 20})
        '{"width":10,"height":20}'
    """
    try:
        return json.dumps(obj, default=_own_fields, separators=(',', ':'))
    except (TypeError, ValueError) as e:
        # e.g. tuple dict keys, circular references
        raise SerializationError(f'Object of type {type(obj).__name__} has no JSON representation: {e}') from e


def revive_with_behavior[T](proto: type[T] | T, json_text: str | bytes) -> T:
    """Revive JSON text as an instance of the given class

    The parsed fields become the instance attributes as they are; the class
    constructor is not called, so no field is validated or defaulted.

    Args:
        proto (type | object):
            Class providing the behavior. An instance may be passed instead,
            in which case its class is used.
        json_text (str | bytes):
            JSON text of an object, e.g. '{"width":10,"height":20}'.

    Returns:
        object: Instance of `proto` holding exactly the parsed fields.

    Raises:
        DeserializationError: If `json_text` is not valid JSON or is not a JSON object.

    Example:
        >>> r = revive_with_behavior(Rectangle, '{"width":10,"height":20}')
        >>> (r.width, r.height, r.area())
        (10, 20, 200)
    """
    cls = proto if isinstance(proto, type) else type(proto)

    try:
        fields = json.loads(json_text)
    except (json.JSONDecodeError, TypeError, UnicodeDecodeError) as e:
        logger.debug('Failed to parse JSON text.', extra={'targetClass': cls.__name__, 'error': str(e)})
        raise DeserializationError(f'Invalid JSON text for {cls.__name__}: {e}') from e

    if not isinstance(fields, dict):
        raise DeserializationError(f'Expected a JSON object for {cls.__name__} (given JSON type: {type(fields).__name__}).')

    try:
        obj = cls.__new__(cls)
        # bypass __setattr__, frozen dataclasses refuse attribute assignment
        vars(obj).update(fields)
    except TypeError as e:
        raise DeserializationError(f'Can not attach fields to {cls.__name__} instances: {e}') from e

    return obj
