import asyncio

import pytest

from fluentfp.utils import tasks


@pytest.mark.asyncio
async def test_is_cancelling_false_by_default() -> None:
    assert tasks.is_cancelling() is False


@pytest.mark.asyncio
async def test_is_cancelling_after_cancel_request() -> None:
    seen = []

    async def fn() -> None:
        try:
            await asyncio.sleep(60)
        except asyncio.CancelledError:
            seen.append(tasks.is_cancelling())
            raise

    task = asyncio.create_task(fn())
    await asyncio.sleep(0)
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task

    assert seen == [True]


def test_no_payload_error() -> None:
    cancelled = asyncio.CancelledError()

    err = tasks.no_payload_error(cancelled)

    assert isinstance(err, RuntimeError)
    assert err.__cause__ is cancelled
    assert str(err) == tasks.NO_PAYLOAD_MESSAGE
