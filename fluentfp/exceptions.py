import typing as t

import typing_extensions as te

Variant = te.Literal['empty optional', 'error result', 'ok result']


@te.final
class InvalidUnwrap(ValueError):
    """InvalidUnwrap refers to extracting a value from the wrong variant.

    Thrown by ``unwrap`` of an empty Optional, ``unwrap`` of an error
    Result or ``unwrap_err`` of an ok Result.
    """
    __slots__ = (
        '_method',
        '_variant',
    )

    def __init__(
        self,
        method: str,
        variant: Variant,
        message: t.Optional[str] = None,
    ) -> None:
        super().__init__(message or f'Cannot call {method} on {variant}')
        self._method = method
        self._variant = variant

    @property
    def method(self) -> str:
        return self._method

    @property
    def variant(self) -> Variant:
        return self._variant

    def __repr__(self) -> str:
        return f'InvalidUnwrap :: {self._method} on {self._variant}'
