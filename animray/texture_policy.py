"""Functors and policies describing how a texture maps locations to colours."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class ConstValue:
    """A functor that always returns the same value."""

    value: Any

    def __call__(self):
        return self.value


def identity(value):
    """Return the value unchanged."""
    return value


@dataclass
class Coercer:
    """Converts one colour to another; with no converter it passes values through."""

    converter: Optional[Callable[[Any], Any]] = None

    def __call__(self, value):
        if self.converter is None:
            return value
        return self.converter(value)


def apply(fn, argument):
    """Call a unary functor with the argument."""
    return fn(argument)


def apply_without_arguments(fn, argument):
    """Call a nullary functor, dropping the argument."""
    return fn()


def location_mapper_binary_op(fn, location):
    """Split a 2D location into x and y and call a binary functor with them."""
    if hasattr(location, "x") and hasattr(location, "y"):
        x, y = location.x, location.y
    else:
        x, y = location
    return fn(x, y)


@dataclass
class TexturePolicy:
    """How a texture's functor is called and how its result becomes a colour."""

    functor: Any
    color_conversion: Callable[[Any], Any]
    location_mapping: Callable[[Any, Any], Any]

    def __call__(self, location):
        """Return the colour of the texture at ``location``."""
        return self.color_conversion(self.location_mapping(self.functor, location))


_VARARGS_FLAG = 0x04


def _is_binary(functor) -> bool:
    """True when ``functor`` takes exactly two required positional arguments."""
    bound = 0
    target = functor
    if hasattr(target, "__func__"):
        bound = 1
        target = target.__func__
    code = getattr(target, "__code__", None)
    if code is None:
        call = getattr(type(functor), "__call__", None)
        code = getattr(call, "__code__", None)
        if code is None:
            return False
        target = call
        bound = 1
    if code.co_flags & _VARARGS_FLAG:
        return False
    defaults = len(getattr(target, "__defaults__", None) or ())
    required = code.co_argcount - defaults - bound
    return required == 2


def texture_policy(functor, converter=None) -> TexturePolicy:
    """Choose the policy that suits ``functor``.

    A ``ConstValue`` ignores the location and its value is used unchanged.
    A function of two arguments is called with the location's x and y.
    Anything else is called with the location itself. Results of the last two
    are passed through ``converter`` when one is given.
    """
    if isinstance(functor, ConstValue):
        return TexturePolicy(functor, identity, apply_without_arguments)
    if _is_binary(functor):
        return TexturePolicy(functor, Coercer(converter), location_mapper_binary_op)
    return TexturePolicy(functor, Coercer(converter), apply)