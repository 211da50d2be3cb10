import asyncio
import dataclasses as dc
import typing as t

from loguru import logger
import typing_extensions as te

from fluentfp import exceptions
from fluentfp.utils import tasks

if t.TYPE_CHECKING:
    from fluentfp.result import Result

T = t.TypeVar('T')
U = t.TypeVar('U')
E = t.TypeVar('E')


@te.final
@dc.dataclass(frozen=True, eq=False)
class Optional(t.Generic[T]):
    """Optional is either Present, wrapping a value, or Empty.

    It is meant as an alternative to returning ``None``. The caller sees
    that there might be no meaningful value and handles both cases with
    the fluent API of this class instead of checking for ``None``.

    Presence is tracked separately from the value, so ``Optional.of(None)``
    is Present. Use ``Optional.of_nullable`` to turn ``None`` into Empty.
    """

    _present: bool
    _value: t.Optional[T] = None

    @classmethod
    def of(cls, value: T) -> 'Optional[T]':
        return cls(True, value)

    @classmethod
    def empty(cls) -> 'Optional[T]':
        return cls(False)

    @classmethod
    def of_nullable(cls, value: t.Optional[T]) -> 'Optional[T]':
        return cls.empty() if value is None else cls.of(value)

    @classmethod
    def from_result(cls, result: 'Result[T, t.Any]') -> 'Optional[T]':
        """Wraps the Ok value of the result, an Err result gives Empty."""
        return cls.of(result.unwrap()) if result.is_ok else cls.empty()

    @classmethod
    def from_thrower(cls, fn: t.Callable[[], T]) -> 'Optional[T]':
        """Calls ``fn`` and wraps what it returns.

        If ``fn`` raises, the exception is discarded and Empty is returned.
        """
        try:
            value = fn()
        except Exception as err:
            _discard(err)
            return cls.empty()
        return cls.of(value)

    @classmethod
    async def from_thrower_async(
        cls,
        fn: t.Callable[[], t.Awaitable[T]],
    ) -> 'Optional[T]':
        """Awaits ``fn()`` and wraps what it resolves to.

        If it raises, or the awaited task was cancelled, Empty is returned.
        Cancellation of the calling task propagates.
        """
        try:
            value = await fn()
        except asyncio.CancelledError as err:
            if tasks.is_cancelling():
                raise
            _discard(err)
            return cls.empty()
        except Exception as err:
            _discard(err)
            return cls.empty()
        return cls.of(value)

    @classmethod
    async def from_task(cls, task: t.Awaitable[T]) -> 'Optional[T]':
        return await cls.from_thrower_async(lambda: task)

    @property
    def is_present(self) -> bool:
        return self._present

    @property
    def is_empty(self) -> bool:
        return not self._present

    def unwrap(self) -> T:
        """Returns the Present value.

        :raises InvalidUnwrap: if the Optional is Empty
        """
        if not self._present:
            raise exceptions.InvalidUnwrap('unwrap', 'empty optional')
        return t.cast(T, self._value)

    def unwrap_or_none(self) -> t.Optional[T]:
        return self._value if self._present else None

    def else_(self, fallback: T) -> T:
        return t.cast(T, self._value) if self._present else fallback

    def to_result(self, err_if_empty: E) -> 'Result[T, E]':
        from fluentfp.result import Result
        return Result.from_optional(self, err_if_empty)

    def map(self, f: t.Callable[[T], U]) -> 'Optional[U]':
        if not self._present:
            return Optional.empty()
        return Optional.of(f(t.cast(T, self._value)))

    async def map_async(
        self,
        f: t.Callable[[T], t.Awaitable[U]],
    ) -> 'Optional[U]':
        if not self._present:
            return Optional.empty()
        return Optional.of(await f(t.cast(T, self._value)))

    def flat_map(self, f: t.Callable[[T], 'Optional[U]']) -> 'Optional[U]':
        if not self._present:
            return Optional.empty()
        return f(t.cast(T, self._value))

    async def flat_map_async(
        self,
        f: t.Callable[[T], t.Awaitable['Optional[U]']],
    ) -> 'Optional[U]':
        if not self._present:
            return Optional.empty()
        return await f(t.cast(T, self._value))

    def filter(self, predicate: t.Callable[[T], bool]) -> 'Optional[T]':
        """Keeps the Present value only if ``predicate`` accepts it."""
        if self._present and predicate(t.cast(T, self._value)):
            return self
        return Optional.empty()

    async def filter_async(
        self,
        predicate: t.Callable[[T], t.Awaitable[bool]],
    ) -> 'Optional[T]':
        if self._present and await predicate(t.cast(T, self._value)):
            return self
        return Optional.empty()

    def if_present(self, f: t.Callable[[T], t.Any]) -> 'Optional[T]':
        if self._present:
            f(t.cast(T, self._value))
        return self

    async def if_present_async(
        self,
        f: t.Callable[[T], t.Awaitable[t.Any]],
    ) -> 'Optional[T]':
        if self._present:
            await f(t.cast(T, self._value))
        return self

    def if_empty(self, f: t.Callable[[], t.Any]) -> 'Optional[T]':
        if not self._present:
            f()
        return self

    async def if_empty_async(
        self,
        f: t.Callable[[], t.Awaitable[t.Any]],
    ) -> 'Optional[T]':
        if not self._present:
            await f()
        return self

    def if_(
        self,
        f_present: t.Callable[[T], t.Any],
        f_empty: t.Optional[t.Callable[[], t.Any]] = None,
    ) -> 'Optional[T]':
        """Calls the handler matching the state of the Optional.

        ``f_empty`` is optional, without it an Empty Optional calls nothing.
        """
        self.if_present(f_present)
        if f_empty is not None:
            self.if_empty(f_empty)
        return self

    async def if_async(
        self,
        f_present: t.Callable[[T], t.Awaitable[t.Any]],
        f_empty: t.Optional[t.Callable[[], t.Awaitable[t.Any]]] = None,
    ) -> 'Optional[T]':
        await self.if_present_async(f_present)
        if f_empty is not None:
            await self.if_empty_async(f_empty)
        return self

    def __repr__(self) -> str:
        return f'Present({self._value!r})' if self._present else 'Empty()'


def _discard(err: BaseException) -> None:
    logger.opt(lazy=True).debug(
        'Discarding {err} to create empty Optional',
        err=lambda: repr(err),
    )
