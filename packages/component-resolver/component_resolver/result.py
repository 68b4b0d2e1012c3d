"""Helpers for chaining `returns` results with domain errors."""

from typing import Callable, Type, TypeVar

from returns.result import Result

ExcT = TypeVar('ExcT', bound=Exception)
A = TypeVar('A')
B = TypeVar('B')


def bind_safe(
    error_cls: Type[ExcT],
) -> Callable[[Callable[[A], Result[B, Exception]], str], Callable[[A], Result[B, ExcT]]]:
    """Turn a @safe step into a bind() callable whose failures become ``error_cls``.

    Example:
        >>> bind_config = bind_safe(ConfigLoadError)
        >>> _read_file(path).bind(bind_config(_parse_toml, 'Failed to parse TOML config'))
    """

    def wrap(
        step: Callable[[A], Result[B, Exception]],
        prefix: str,
    ) -> Callable[[A], Result[B, ExcT]]:
        return lambda value: step(value).alt(lambda e: error_cls(f'{prefix}: {e}'))

    return wrap
