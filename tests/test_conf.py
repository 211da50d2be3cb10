import typing as t

import pytest

from fluentfp import conf


@pytest.mark.parametrize(
    'environ,environment,log_captured_errors',
    (
        ({}, conf.DEVELOPMENT, True),
        ({conf.ENV_VARIABLE: ''}, conf.DEVELOPMENT, True),
        ({conf.ENV_VARIABLE: 'production'}, conf.PRODUCTION, False),
        ({conf.ENV_VARIABLE: ' Production '}, conf.PRODUCTION, False),
        ({conf.ENV_VARIABLE: 'staging'}, 'staging', True),
    ),
)
def test_from_env(
    environ: t.Mapping[str, str],
    environment: str,
    log_captured_errors: bool,
) -> None:
    c = conf.Configuration.from_env(environ)

    assert c.environment == environment
    assert c.log_captured_errors is log_captured_errors


def test_current_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(conf.ENV_VARIABLE, raising=False)
    assert conf.current().environment == conf.DEVELOPMENT

    monkeypatch.setenv(conf.ENV_VARIABLE, conf.PRODUCTION)
    assert conf.current().environment == conf.PRODUCTION


def test_configure(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(conf.ENV_VARIABLE, conf.PRODUCTION)
    explicit = conf.Configuration(environment='test')

    conf.configure(explicit)
    assert conf.current() is explicit

    conf.configure(None)
    assert conf.current().environment == conf.PRODUCTION


def test_configuration_is_frozen() -> None:
    c = conf.Configuration()

    with pytest.raises(AttributeError):
        c.environment = conf.PRODUCTION  # type: ignore
