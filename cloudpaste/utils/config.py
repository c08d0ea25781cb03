"""Utility functions for application configuration management.

Backend connection settings (Redis) are stored in **AWS AppConfig**. Each
environment (`APP_ENV`) has a dedicated AppConfig *Environment* within the
AppConfig *Application* identified by `APP_NAME`. The configuration JSON
follows this structure:

    {
        "build": "2025-10-15.1",
        "active_backend": "redis",
        "configs": {
            "paste": {
                "redis": {"host": "...", "port": 6379, "db": 0}
            }
        }
    }

Each Lambda loads its own section (e.g., `"paste"`) for the active backend.

Deployment policy (public base URL, whether pastes may never expire) is read
from environment variables into an immutable PasteSettings instance.

Functions:
    app_env() -> str
        Current application environment (`APP_ENV`), `'local'` by default.
    app_name() -> str | None
        Application name (`APP_NAME`), None if not set.
    app_prefix() -> str | None
        Key prefix for DAOs (`<APP_NAME>:<APP_ENV>`), None if `APP_NAME` is not set.
    load_config(lambda_name: str) -> dict
        Load the lambda's backend configuration from AWS AppConfig
        (or from a local AppConfig agent under SAM).
    paste_settings(event: dict) -> PasteSettings
        Build the paste deployment policy for the current invocation.

Example:
    >>> from cloudpaste.utils.config import load_config
    >>> config = load_config('paste')
    >>> print(config['redis']['host'])
    redis-15501.host.docker.internal
"""

import os
import json
import functools
import urllib.parse
import urllib.request
import logging
from dataclasses import dataclass
from collections.abc import Callable

import boto3

from cloudpaste.constants import ENV
from cloudpaste.exceptions import BadConfigurationError
from cloudpaste.types import LambdaConfiguration, LambdaEvent
from cloudpaste.utils.helpers import base_url, require_environment
from cloudpaste.utils.runtime import running_locally


logger = logging.getLogger(__name__)

TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
FALSY = frozenset({'0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class PasteSettings:
    """Deployment policy for the paste service.

    Attributes:
        base_url (str):
            Public base URL used to build absolute links (no trailing slash).
        allow_never_expire (bool):
            Whether "Never" is an accepted expiration choice.
    """

    base_url: str
    allow_never_expire: bool = True


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _parse_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    raise BadConfigurationError(f"Environment variable '{name}' must be a boolean flag (given value: {raw!r}).")


def paste_settings(event: LambdaEvent) -> PasteSettings:
    """Build the paste deployment policy

    `PASTE_BASE_URL` takes precedence; otherwise the base URL is derived
    from the API Gateway request context.

    Args:
        event (dict):
            API Gateway event passed to the Lambda handler.

    Returns:
        PasteSettings: immutable deployment policy.

    Raises:
        BadConfigurationError:
            If `PASTE_ALLOW_NEVER_EXPIRE` is not a recognizable boolean.

    Example:
        >>> os.environ['PASTE_BASE_URL'] = 'https://paste.example.com/'
        >>> os.environ['PASTE_ALLOW_NEVER_EXPIRE'] = 'false'
        >>> paste_settings({})
        PasteSettings(base_url='https://paste.example.com', allow_never_expire=False)
    """
    configured_url = os.environ.get(ENV.Paste.BASE_URL)
    url = configured_url if configured_url else base_url(event)
    return PasteSettings(
        base_url=url.rstrip('/'),
        allow_never_expire=_parse_flag(ENV.Paste.ALLOW_NEVER_EXPIRE, default=True),
    )


def _select_lambda_config(config: dict, lambda_name: str) -> LambdaConfiguration:
    try:
        backend = config['active_backend']
        return {backend: config['configs'][lambda_name][backend]}
    except (KeyError, TypeError) as e:
        raise BadConfigurationError(f"AppConfig document has no '{lambda_name}' configuration for the active backend.") from e


def _sam_load_local_appconfig(func: Callable) -> Callable:  # pragma: no cover
    """Decorator: load AppConfig from a local AppConfig Agent when running under SAM

    Behavior:
        - If the application is running locally and `APPCONFIG_AGENT_URL` is set
          to a safe local URL, fetch the app configuration JSON from the local agent.
        - Else, call the wrapped function (which pulls from AWS AppConfig via boto3).
    """

    def validate_agent_url(url: str | None) -> str:
        if not url:
            return ''
        components = urllib.parse.urlparse(url)
        if components.scheme not in {'http', 'https'}:
            raise BadConfigurationError(f'Bad AppConfig agent scheme {url}')
        if components.hostname not in {'localhost', '127.0.0.1', 'host.docker.internal'}:
            raise BadConfigurationError(f'Bad AppConfig agent host {url}')
        if components.port not in {2772, None}:
            raise BadConfigurationError(f'Bad AppConfig agent port {url}')
        return url

    @functools.wraps(func)
    def wrapper(lambda_name: str, *args, **kwargs) -> LambdaConfiguration:
        agent_url = validate_agent_url(os.getenv(ENV.AppConfig.AGENT_URL))
        if not running_locally() or not agent_url:
            return func(lambda_name, *args, **kwargs)

        profile_name = os.getenv(ENV.AppConfig.PROFILE_NAME, 'backend-config')
        url = f'{agent_url}/applications/{app_name()}/environments/{app_env()}/configurations/{profile_name}'

        logger.debug('Trying to load AppConfig from local agent.', extra={'agentUrl': url, 'lambdaName': lambda_name})
        with urllib.request.urlopen(url, timeout=5) as r:  # noqa: S310
            config = json.load(r)

        data = _select_lambda_config(config, lambda_name)
        logger.debug('Loaded AppConfig from local agent.', extra={'lambdaName': lambda_name, 'build': config.get('build')})
        return data

    return wrapper


@_sam_load_local_appconfig
@require_environment(ENV.AppConfig.APP_ID, ENV.AppConfig.ENV_ID, ENV.AppConfig.PROFILE_ID)
def load_config(lambda_name: str) -> LambdaConfiguration:
    """Load configuration for a given Lambda from AWS AppConfig

    Environment variables required:
        APPCONFIG_APP_ID       – AppConfig Application ID
        APPCONFIG_ENV_ID       – AppConfig Environment ID
        APPCONFIG_PROFILE_ID   – AppConfig Configuration Profile ID

    Args:
        lambda_name (str):
            Name of the Lambda (e.g., "paste").

    Returns:
        dict: The lambda's config section for the active backend.

    Raises:
        MissingEnvironmentVariableError:
            If any of the AppConfig identifiers is not set.
        BadConfigurationError:
            If the AppConfig document is not valid JSON or lacks the lambda's section.

    Example:
        >>> app_config = load_config('paste')
        >>> app_config['redis']['host']
        'redis-15501.host.docker.internal'
    """
    logger.debug('Trying to load AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name})

    appconfig = boto3.client('appconfigdata')

    # Start an AppConfig data session
    session_token = appconfig.start_configuration_session(
        ApplicationIdentifier=os.environ[ENV.AppConfig.APP_ID],
        EnvironmentIdentifier=os.environ[ENV.AppConfig.ENV_ID],
        ConfigurationProfileIdentifier=os.environ[ENV.AppConfig.PROFILE_ID],
    )['InitialConfigurationToken']

    response = appconfig.get_latest_configuration(ConfigurationToken=session_token)
    content = response['Configuration'].read()
    try:
        config = json.loads(content.decode('utf-8'))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BadConfigurationError('AppConfig document is not valid JSON.') from e

    data = _select_lambda_config(config, lambda_name)
    logger.debug('Loaded AppConfig from AWS AppConfig.', extra={'lambdaName': lambda_name, 'build': config.get('build')})
    return data
