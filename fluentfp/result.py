import asyncio
import dataclasses as dc
import typing as t

from loguru import logger
import typing_extensions as te

from fluentfp import conf
from fluentfp import exceptions
from fluentfp.optional import Optional
from fluentfp.utils import tasks

TOk = t.TypeVar('TOk')
TErr = t.TypeVar('TErr')
UOk = t.TypeVar('UOk')
UErr = t.TypeVar('UErr')

Variant = te.Literal['ok', 'err']
VARIANTS: te.Final = ('ok', 'err')


@te.final
@dc.dataclass(frozen=True, eq=False)
class Result(t.Generic[TOk, TErr]):
    """Result is either Ok, wrapping a value, or Err, wrapping an error.

    It is meant as an alternative to raising exceptions. The caller sees
    that a function may fail and handles both success and failure with
    the fluent API of this class.
    """

    _variant: Variant
    _payload: t.Any

    def __post_init__(self) -> None:
        if self._variant not in VARIANTS:
            raise ValueError(
                f'Result must be either of {VARIANTS}, '
                f'but got {self._variant!r}',
            )

    @classmethod
    def ok(cls, value: TOk) -> 'Result[TOk, TErr]':
        return cls('ok', value)

    @classmethod
    def err(cls, error: TErr) -> 'Result[TOk, TErr]':
        return cls('err', error)

    @classmethod
    def from_optional(
        cls,
        optional: Optional[TOk],
        err_if_empty: TErr,
    ) -> 'Result[TOk, TErr]':
        """Wraps the Present value as Ok, Empty becomes ``Err(err_if_empty)``."""
        if optional.is_empty:
            return cls.err(err_if_empty)
        return cls.ok(optional.unwrap())

    @classmethod
    def from_thrower(cls, fn: t.Callable[[], TOk]) -> 'Result[TOk, Exception]':
        """Calls ``fn``, wrapping its return value as Ok and a raised exception as Err."""
        try:
            value = fn()
        except Exception as err:
            _log_captured(err)
            return Result.err(err)
        return Result.ok(value)

    @classmethod
    async def from_thrower_async(
        cls,
        fn: t.Callable[[], t.Awaitable[TOk]],
    ) -> 'Result[TOk, Exception]':
        """Awaits ``fn()``, wrapping its outcome as Ok or Err.

        An awaited task that was cancelled carries no error of its own,
        it ends up as Err holding a ``RuntimeError`` caused by the
        cancellation. Cancellation of the calling task propagates.
        """
        try:
            value = await fn()
        except asyncio.CancelledError as cancelled:
            if tasks.is_cancelling():
                raise
            err = tasks.no_payload_error(cancelled)
            _log_captured(err)
            return Result.err(err)
        except Exception as err:
            _log_captured(err)
            return Result.err(err)
        return Result.ok(value)

    @classmethod
    async def from_task(cls, task: t.Awaitable[TOk]) -> 'Result[TOk, Exception]':
        return await cls.from_thrower_async(lambda: task)

    @property
    def is_ok(self) -> bool:
        return self._variant == 'ok'

    @property
    def is_err(self) -> bool:
        return self._variant == 'err'

    def unwrap(self) -> TOk:
        """Returns the Ok value.

        :raises InvalidUnwrap: if the Result is Err
        """
        if not self.is_ok:
            raise exceptions.InvalidUnwrap('unwrap', 'error result')
        return t.cast(TOk, self._payload)

    def unwrap_err(self) -> TErr:
        """Returns the Err value.

        :raises InvalidUnwrap: if the Result is Ok
        """
        if not self.is_err:
            raise exceptions.InvalidUnwrap('unwrap_err', 'ok result')
        return t.cast(TErr, self._payload)

    def to_optional(self) -> Optional[TOk]:
        """Wraps the Ok value in a Present Optional, the Err value is dropped."""
        return Optional.from_result(self)

    def else_(self, fallback: TOk) -> TOk:
        return t.cast(TOk, self._payload) if self.is_ok else fallback

    def else_err(self, fallback: TErr) -> TErr:
        return t.cast(TErr, self._payload) if self.is_err else fallback

    def if_ok(self, f: t.Callable[[TOk], t.Any]) -> 'Result[TOk, TErr]':
        if self.is_ok:
            f(t.cast(TOk, self._payload))
        return self

    async def if_ok_async(
        self,
        f: t.Callable[[TOk], t.Awaitable[t.Any]],
    ) -> 'Result[TOk, TErr]':
        if self.is_ok:
            await f(t.cast(TOk, self._payload))
        return self

    def if_err(self, f: t.Callable[[TErr], t.Any]) -> 'Result[TOk, TErr]':
        if self.is_err:
            f(t.cast(TErr, self._payload))
        return self

    async def if_err_async(
        self,
        f: t.Callable[[TErr], t.Awaitable[t.Any]],
    ) -> 'Result[TOk, TErr]':
        if self.is_err:
            await f(t.cast(TErr, self._payload))
        return self

    def if_(
        self,
        f_ok: t.Callable[[TOk], t.Any],
        f_err: t.Optional[t.Callable[[TErr], t.Any]] = None,
    ) -> 'Result[TOk, TErr]':
        """Calls the handler matching the variant of the Result.

        ``f_err`` is optional, without it an Err Result calls nothing.
        """
        self.if_ok(f_ok)
        if f_err is not None:
            self.if_err(f_err)
        return self

    async def if_async(
        self,
        f_ok: t.Callable[[TOk], t.Awaitable[t.Any]],
        f_err: t.Optional[t.Callable[[TErr], t.Awaitable[t.Any]]] = None,
    ) -> 'Result[TOk, TErr]':
        await self.if_ok_async(f_ok)
        if f_err is not None:
            await self.if_err_async(f_err)
        return self

    def map(self, f: t.Callable[[TOk], UOk]) -> 'Result[UOk, TErr]':
        if self.is_ok:
            return Result.ok(f(t.cast(TOk, self._payload)))
        return Result.err(t.cast(TErr, self._payload))

    async def map_async(
        self,
        f: t.Callable[[TOk], t.Awaitable[UOk]],
    ) -> 'Result[UOk, TErr]':
        if self.is_ok:
            return Result.ok(await f(t.cast(TOk, self._payload)))
        return Result.err(t.cast(TErr, self._payload))

    def map_err(self, f: t.Callable[[TErr], UErr]) -> 'Result[TOk, UErr]':
        if self.is_err:
            return Result.err(f(t.cast(TErr, self._payload)))
        return Result.ok(t.cast(TOk, self._payload))

    async def map_err_async(
        self,
        f: t.Callable[[TErr], t.Awaitable[UErr]],
    ) -> 'Result[TOk, UErr]':
        if self.is_err:
            return Result.err(await f(t.cast(TErr, self._payload)))
        return Result.ok(t.cast(TOk, self._payload))

    def flat_map(
        self,
        f: t.Callable[[TOk], 'Result[UOk, TErr]'],
    ) -> 'Result[UOk, TErr]':
        if self.is_ok:
            return f(t.cast(TOk, self._payload))
        return Result.err(t.cast(TErr, self._payload))

    async def flat_map_async(
        self,
        f: t.Callable[[TOk], t.Awaitable['Result[UOk, TErr]']],
    ) -> 'Result[UOk, TErr]':
        if self.is_ok:
            return await f(t.cast(TOk, self._payload))
        return Result.err(t.cast(TErr, self._payload))

    def flat_map_err(
        self,
        f: t.Callable[[TErr], 'Result[TOk, UErr]'],
    ) -> 'Result[TOk, UErr]':
        if self.is_err:
            return f(t.cast(TErr, self._payload))
        return Result.ok(t.cast(TOk, self._payload))

    async def flat_map_err_async(
        self,
        f: t.Callable[[TErr], t.Awaitable['Result[TOk, UErr]']],
    ) -> 'Result[TOk, UErr]':
        if self.is_err:
            return await f(t.cast(TErr, self._payload))
        return Result.ok(t.cast(TOk, self._payload))

    def __repr__(self) -> str:
        variant = 'Ok' if self.is_ok else 'Err'
        return f'{variant}({self._payload!r})'


def _log_captured(err: BaseException) -> None:
    if not conf.current().log_captured_errors:
        return
    logger.opt(exception=err).error(
        'Creating error Result containing the following exception: {err!r}',
        err=err,
    )
