from cloudpaste.utils.config import app_env, app_name, app_prefix, load_config, paste_settings, PasteSettings
from cloudpaste.utils.helpers import base_url, get_paste_url, get_create_url, get_header, require_environment, guarantee_500_response
from cloudpaste.utils.identifiers import generate_paste_id, parse_paste_id
from cloudpaste.utils.expiration import compute_expiration, build_paste
from cloudpaste.utils.logging import initialize_logging


__all__ = [
    'generate_paste_id',
    'parse_paste_id',
    'compute_expiration',
    'build_paste',
    'app_env',
    'app_name',
    'app_prefix',
    'load_config',
    'paste_settings',
    'PasteSettings',
    'base_url',
    'get_paste_url',
    'get_create_url',
    'get_header',
    'require_environment',
    'guarantee_500_response',
    'initialize_logging',
]
