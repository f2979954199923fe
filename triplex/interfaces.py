"""Interfaces supporting the triplex data model.

A *schema* for a domain type ``T`` and a representation type ``S`` is the
triple of operations

* ``encode(value: T) -> S``
* ``decode(data: S) -> T``
* ``validate(data) -> bool``, true iff *data* is an ``S``.

``S`` is restricted to values that can be handed to a serializer (for JSON:
``str``, ``int``, ``float``, ``bool``, ``None``, lists and string-keyed dicts).
``encode`` and ``decode`` are total over their declared inputs and do not
re-check them; ``validate`` is total over *every* input and never raises.
Callers validate untrusted data before decoding it.

For any value ``t`` built through normal construction,
``decode(encode(t))`` is equal to ``t`` and ``validate(encode(t))`` is true.

Every combinator in this package consumes and produces objects satisfying
the :py:class:`Schema` protocol, and never needs to know which concrete
class it was given. :py:class:`BasicSchema` is the implementation returned
by all of the combinators.

References:
    Structural subtyping (static duck-typing): https://www.python.org/dev/peps/pep-0544/
"""

from __future__ import annotations

__all__ = ['BasicInjectSchema', 'BasicSchema', 'InjectSchema', 'Schema', 'schema']

import typing

T = typing.TypeVar('T')
S = typing.TypeVar('S')
D = typing.TypeVar('D')
B = typing.TypeVar('B')

Encoder = typing.Callable[[T], S]
Decoder = typing.Callable[[S], T]
Validator = typing.Callable[[typing.Any], bool]


@typing.runtime_checkable
class Schema(typing.Protocol[T, S]):
    """Encode, decode, and validate values of a domain type."""

    def encode(self, value: T) -> S:
        """Convert a domain value into its representation."""
        ...

    def decode(self, data: S) -> T:
        """Reconstruct a domain value from a validated representation."""
        ...

    def validate(self, data: typing.Any) -> bool:
        """Check whether arbitrary *data* is a valid representation."""
        ...


@typing.runtime_checkable
class InjectSchema(Schema[B, S], typing.Protocol[T, D, B, S]):
    """A schema for domain values that need external context to reconstruct.

    The serialized part of a ``T`` is its *base* value ``B``. ``encode``,
    ``decode`` and ``validate`` work on ``B``. ``project`` drops the context
    from a ``T``; ``inject`` takes a context ``D`` and returns a function
    that rebuilds a ``T`` from a ``B``.

    For a value ``t`` originally associated with context ``d``,
    ``inject(d)(project(t))`` should recover ``t``. The schema does not
    check this; it is the schema author's responsibility.
    """

    def project(self, value: T) -> B:
        ...

    def inject(self, context: D) -> typing.Callable[[B], T]:
        ...


class BasicSchema(typing.Generic[T, S]):
    """Reference implementation of the :py:class:`Schema` protocol.

    Holds the three operations as plain callables. Instances are immutable
    and carry no other state, so a schema may be shared freely between
    composite schemas and threads.

    ``validate`` rejects data that exhausts the interpreter stack, such as
    very deeply nested or self-containing structures, instead of raising.
    """
    __slots__ = ('_encode', '_decode', '_validate')

    def __init__(self, encode: Encoder, decode: Decoder, validate: Validator):
        if not all(callable(f) for f in (encode, decode, validate)):
            raise TypeError('Schema operations must be callable.')
        object.__setattr__(self, '_encode', encode)
        object.__setattr__(self, '_decode', decode)
        object.__setattr__(self, '_validate', validate)

    def encode(self, value: T) -> S:
        return self._encode(value)

    def decode(self, data: S) -> T:
        return self._decode(data)

    def validate(self, data: typing.Any) -> bool:
        try:
            return bool(self._validate(data))
        except RecursionError:
            # Input nested deeper than the interpreter stack allows, or cyclic.
            return False

    def __setattr__(self, key, value):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __delattr__(self, key):
        raise AttributeError(f'{self.__class__.__name__} is immutable.')

    def __repr__(self):
        return f'<{self.__class__.__name__} at {hex(id(self))}>'


class BasicInjectSchema(BasicSchema[B, S], typing.Generic[T, D, B, S]):
    """Reference implementation of the :py:class:`InjectSchema` protocol."""
    __slots__ = ('_project', '_inject')

    def __init__(self,
                 encode: Encoder,
                 decode: Decoder,
                 validate: Validator,
                 project: typing.Callable[[T], B],
                 inject: typing.Callable[[D], typing.Callable[[B], T]]):
        super().__init__(encode, decode, validate)
        if not callable(project) or not callable(inject):
            raise TypeError('*project* and *inject* must be callable.')
        object.__setattr__(self, '_project', project)
        object.__setattr__(self, '_inject', inject)

    def project(self, value: T) -> B:
        return self._project(value)

    def inject(self, context: D) -> typing.Callable[[B], T]:
        return self._inject(context)


def schema(encode: Encoder, decode: Decoder, validate: Validator) -> BasicSchema:
    """Basic schema constructor function.

    Example::

        celsius = schema(encode=lambda t: t.degrees,
                         decode=Temperature,
                         validate=lambda data: isinstance(data, float))

    """
    return BasicSchema(encode, decode, validate)
