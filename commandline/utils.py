"""
commandline utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the parameter, action and option layers.
- Public-but-internal leaning: stable enough for consumers, designed primarily
  to support the declaration and parsing layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None
    or with the empty string (an empty default description is meaningful).
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- rename(callable, name) / @rename("name")
  • Assign stable __name__/__qualname__ to generated accessors for clean tracebacks.

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr).
    Containers are handed out frozen (tuple/MappingProxyType/frozenset), so the
    definitions built once at startup cannot be mutated while parsing.

Quick examples
    >>> one = coalesce(Unset, "fallback")  # "fallback"
    >>> two = coalesce("", "fallback")      # ""  (empty string is preserved)
    >>> class X:
    ...     _items = [1, 2]
    ...     items = mirror("items")
    ... X().items
    (1, 2)
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None, 0 and "".
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return type(self) | other
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        """
        Support reversed PEP 604 unions when Unset appears on the right.
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        """
        Ensure a single instance for this sentinel type.
        """
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        """
        Disallow subclassing to preserve sentinel semantics.
        """
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    Returns the given object unless it is the Unset sentinel, in which case the
    provided default is returned. Falsey values like None, 0 or "" are
    preserved as-is; they are not treated as “unset”.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce("", "fallback")     -> ""
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set a stable __name__/__qualname__ on a callable, or return a decorator
    that will do so later.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name) -> decorator

    Raises
    - TypeError on a non-callable target, a non-string name, or wrong arity.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _freeze(object):
    """
    Shallow freeze of container values.

    - Sequence (non-string) → tuple
    - Mapping               → MappingProxyType
    - Set                   → frozenset
    - anything else         → returned as-is
    """
    if isinstance(object, Sequence) and not isinstance(object, (str, bytes, bytearray)):
        return tuple(object)
    if isinstance(object, Mapping):
        return MappingProxyType(object)
    if isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads from an attribute named "_{name}" on the
    instance and returns a frozen view for container types.

    Parameters
    - name: str
      The public property name and the suffix of the backing field "_{name}".

    Example
    - Given self._parameters, declare parameters = mirror("parameters").
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _freeze(getattr(self, "_" + name))

    return property(getter)


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Notes
- Singleton: there is only one Unset instance.
- Distinct from None and "": identity checks must not treat it as either.
- Typical pattern: value = coalesce(user_value, default).
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
