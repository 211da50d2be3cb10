import dataclasses as dc
import os
import typing as t

from loguru import logger
import typing_extensions as te

ENV_VARIABLE: te.Final[str] = 'FLUENTFP_ENV'

DEVELOPMENT: te.Final[str] = 'development'
PRODUCTION: te.Final[str] = 'production'


@te.final
@dc.dataclass(frozen=True)
class Configuration:
    environment: str = dc.field(
        default=DEVELOPMENT,
        metadata={
            'doc': (
                'Name of the environment the application runs in, '
                f'i.e. "{DEVELOPMENT}" or "{PRODUCTION}"'
            ),
        },
    )

    @property
    def log_captured_errors(self) -> bool:
        return self.environment != PRODUCTION

    @classmethod
    def from_env(
        cls,
        environ: t.Optional[t.Mapping[str, str]] = None,
    ) -> 'Configuration':
        env = os.environ if environ is None else environ
        environment = env.get(ENV_VARIABLE, '').strip().lower()
        return cls(environment=environment or DEVELOPMENT)


_explicit: t.Optional[Configuration] = None


def configure(configuration: t.Optional[Configuration]) -> None:
    """Installs configuration used instead of the environment.

    Passing ``None`` falls back to reading the environment again.
    """
    global _explicit
    logger.opt(lazy=True).debug(
        'fluentfp configuration set to {c}',
        c=lambda: configuration if configuration else f'${ENV_VARIABLE}',
    )
    _explicit = configuration


def current() -> Configuration:
    return _explicit if _explicit is not None else Configuration.from_env()
