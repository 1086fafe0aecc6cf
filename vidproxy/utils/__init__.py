from vidproxy.utils.config import app_env, app_name, project_root, app_prefix, load_config
from vidproxy.utils.helpers import base_url, get_short_url, get_proxy_url, require_https
from vidproxy.utils.shortener import generate_token, generate_shortcode
from vidproxy.utils.logging import initialize_logging


__all__ = [
    'generate_token',
    'generate_shortcode',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'base_url',
    'get_short_url',
    'get_proxy_url',
    'require_https',
    'initialize_logging',
]
