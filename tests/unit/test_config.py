from selectorkit import Settings


def test_defaults(clean_env):
    settings = Settings.from_env()

    assert settings.log_level == 'INFO'
    assert settings.logfire_token is None
    assert settings.service_name == 'selectorkit'


def test_reads_environment(clean_env):
    clean_env.setenv('SELECTORKIT_LOG_LEVEL', 'DEBUG')
    clean_env.setenv('LOGFIRE_TOKEN', 'secret')
    clean_env.setenv('SELECTORKIT_SERVICE_NAME', 'css-builder')

    settings = Settings.from_env()

    assert settings.log_level == 'DEBUG'
    assert settings.logfire_token == 'secret'
    assert settings.service_name == 'css-builder'


def test_empty_token_is_treated_as_missing(clean_env):
    clean_env.setenv('LOGFIRE_TOKEN', '')

    assert Settings.from_env().logfire_token is None


def test_loads_dotenv(clean_env, mocker):
    load = mocker.patch('selectorkit.config.load_dotenv')

    Settings.from_env()

    load.assert_called_once_with()
