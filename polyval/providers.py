"""Message providers: the leaves of message catalogs and override trees."""

import abc
import inspect
import typing
from dataclasses import dataclass


class MessageProvider(abc.ABC):
    """Base class for anything that can produce a message string."""

    @abc.abstractmethod
    def render(self, *args: typing.Any) -> str:
        """Produce the message for a rule's parameters."""


@dataclass(frozen=True)
class LiteralMessage(MessageProvider):
    """A fixed message.

    Attributes:
        text: The message, returned whatever the rule parameters are
    """

    text: str

    def render(self, *args: typing.Any) -> str:
        return self.text


@dataclass(frozen=True)
class ParameterizedMessage(MessageProvider):
    """A message built from the rule's parameters.

    Attributes:
        func: Callable returning the message
        arity: Number of positional parameters func is called with
    """

    func: typing.Callable[..., str]
    arity: int

    def render(self, *args: typing.Any) -> str:
        return str(self.func(*args[: self.arity]))


def _positional_count(func: typing.Callable[..., typing.Any]) -> int:
    """Count the positional parameters of func (without defaults)."""
    parameters = inspect.signature(func).parameters.values()
    return sum(
        1
        for p in parameters
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def as_provider(value: typing.Any, arity: int | None = None) -> MessageProvider:
    """Convert a raw message leaf to a MessageProvider.

    Args:
        value: A string, a callable, or an existing MessageProvider
        arity: Number of parameters the rule supplies. Callables must accept
            exactly that many positional arguments. None infers it from the
            callable's signature.

    Returns:
        LiteralMessage for strings, ParameterizedMessage for callables

    Raises:
        ValueError: If value is neither a string nor a callable, or a
            callable cannot be called with arity arguments
    """
    if isinstance(value, MessageProvider):
        return value
    if isinstance(value, str):
        return LiteralMessage(value)
    if not callable(value):
        raise ValueError(
            f"message must be a string or a callable, got {type(value).__name__}"
        )
    if arity is None:
        return ParameterizedMessage(value, _positional_count(value))
    try:
        inspect.signature(value).bind(*([None] * arity))
    except TypeError as e:
        raise ValueError(
            f"message function must accept {arity} positional argument(s): {e}"
        ) from e
    return ParameterizedMessage(value, arity)
