import asyncio

from loguru import logger
import typing_extensions as te

NO_PAYLOAD_MESSAGE: te.Final[str] = (
    'Caught a cancelled awaitable, '
    'this may indicate a task that failed without passing any error'
)


def is_cancelling() -> bool:
    """Tells if the task running the caller has been requested to cancel.

    Such cancellation belongs to the caller and must propagate, whereas
    cancellation of an awaited task is just its outcome.
    """
    task = asyncio.current_task()
    cancelling = task is not None and task.cancelling() > 0

    logger.opt(lazy=True).trace(
        'Cancellation of {task} requested={c}',
        task=lambda: task.get_name() if task else None,
        c=lambda: cancelling,
    )

    return cancelling


def no_payload_error(cancelled: asyncio.CancelledError) -> RuntimeError:
    err = RuntimeError(NO_PAYLOAD_MESSAGE)
    err.__cause__ = cancelled
    return err
