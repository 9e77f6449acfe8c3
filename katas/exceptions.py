"""Exceptions raised by the katas.

Classes:
    KataError:
        Generic base class for kata-related exceptions.

    SelectorError:
        Base class for CSS selector builder violations.

    SelectorOrderError:
        Raised when selector parts are added out of the element, id, class,
        attribute, pseudo-class, pseudo-element order.

    SelectorDuplicateError:
        Raised when element, id or pseudo-element is set twice.

    SelectorCombinatorError:
        Raised when combining selectors with an unknown combinator.

    JSONBridgeError:
        Base class for JSON bridge failures.

    SerializationError:
        Raised when an object has no JSON representation.

    DeserializationError:
        Raised when JSON text can't be revived into an object.

Example:
    >>> from katas.exceptions import SelectorDuplicateError
    >>> raise SelectorDuplicateError("Selector already has an id.")
    Traceback (most recent call last):
        ...
    katas.exceptions.SelectorDuplicateError: Selector already has an id.
"""


class KataError(Exception):
    """Generic base class for kata-related exceptions."""

    pass


class SelectorError(KataError):
    """Base class for CSS selector builder violations."""

    pass


class SelectorOrderError(SelectorError):
    """Exception raised when selector parts are not arranged in the CSS order."""

    pass


class SelectorDuplicateError(SelectorError):
    """Exception raised when element, id or pseudo-element occurs more than once."""

    pass


class SelectorCombinatorError(SelectorError):
    """Exception raised when an unknown combinator is used to combine selectors."""

    pass


class JSONBridgeError(KataError):
    """Base class for JSON bridge failures."""

    pass


class SerializationError(JSONBridgeError):
    """Exception raised when an object has no JSON representation."""

    pass


class DeserializationError(JSONBridgeError):
    """Exception raised when JSON text can't be revived into an object.

    e.g. malformed JSON, or a top-level value that is not a JSON object.
    """

    pass
