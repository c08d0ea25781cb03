from enum import StrEnum


class TTL:
    """TTL durations in seconds."""

    # Redis-side retention floor for expiring pastes
    MINIMUM = 60
    ONE_HOUR = 3_600  # 60 * 60
    ONE_DAY = 86_400  # 60 * 60 * 24


class Form(StrEnum):
    """Form field names accepted by the create endpoint."""

    TITLE = 'paste-title'
    AUTHOR = 'paste-author'
    CONTENT = 'paste-content'
    EXPIRATION = 'expiration'
    PRIVACY = 'privacy'


# Allowed values of the `expiration` form field (None means never expires)
EXPIRATION_CHOICES = {
    '1 hour': TTL.ONE_HOUR,
    '24 hours': TTL.ONE_DAY,
    'Never': None,
}
NEVER_EXPIRE = 'Never'

# Allowed values of the `privacy` form field (mapped to the unlisted flag)
PRIVACY_CHOICES = {
    'Public': False,
    'Unlisted': True,
}

FORM_CONTENT_TYPE = 'application/x-www-form-urlencoded'
PASTE_RESOURCE = 'paste'
UNTITLED_PASTE = 'Untitled paste'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class AppConfig(StrEnum):
        APP_ID = 'APPCONFIG_APP_ID'
        ENV_ID = 'APPCONFIG_ENV_ID'
        PROFILE_ID = 'APPCONFIG_PROFILE_ID'
        AGENT_URL = 'APPCONFIG_AGENT_URL'
        PROFILE_NAME = 'APPCONFIG_PROFILE_NAME'

    class Paste(StrEnum):
        BASE_URL = 'PASTE_BASE_URL'
        ALLOW_NEVER_EXPIRE = 'PASTE_ALLOW_NEVER_EXPIRE'


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'

# Log event codes
TTL_OVERFLOWED = 'TTL_OVERFLOWED'
