"""
Deferred effects and the combinators used to compose them.

An ``Effect[T]`` is a zero-argument callable returning an awaitable of ``T``.
Building an effect never starts any work; the work runs each time the effect
is invoked, and results are not cached between invocations.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")

Effect = Callable[[], Awaitable[T]]


def of(value: T) -> Effect[T]:
    """Wrap a plain value in an effect that resolves to it."""

    async def effect() -> T:
        return value

    return effect


def lift(pure: Callable[[T], Awaitable[U]]) -> Callable[[T], Effect[U]]:
    """
    Convert an async function into one that returns an effect.

    Args:
        pure: The async function to convert.

    Returns:
        A function which, given an argument, returns an effect that calls
        ``pure`` with it only once the effect is invoked.

    """

    def lifted(value: T) -> Effect[U]:
        async def effect() -> U:
            return await pure(value)

        return effect

    return lifted


def bind(effect: Effect[T], mapper: Callable[[T], Effect[U]]) -> Effect[U]:
    """
    Sequence an effect with a mapper producing the next effect.

    The returned effect awaits ``effect`` first and only then asks ``mapper``
    for the second effect and awaits it. An exception from either stage
    propagates unchanged and stops the chain.

    Args:
        effect: The first effect.
        mapper: Maps the first result to the second effect.

    Returns:
        The composed effect.

    """

    async def bound() -> U:
        value = await effect()
        return await mapper(value)()

    return bound


def fmap(effect: Effect[T], fn: Callable[[T], U]) -> Effect[U]:
    """Apply a plain function to the result of an effect."""

    async def mapped() -> U:
        return fn(await effect())

    return mapped


def gather(effects: Iterable[Effect[T]]) -> Effect[list[T]]:
    """
    Run effects concurrently and collect their results in input order.

    The effects are invoked together when the returned effect is invoked, and
    the first failure among them fails the whole batch.
    """
    pending = list(effects)

    async def gathered() -> list[T]:
        if not pending:
            return []
        return list(await asyncio.gather(*(e() for e in pending)))

    return gathered
