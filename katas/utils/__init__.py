from katas.utils.config import app_env, running_locally, log_level, log_format
from katas.utils.base62 import encode_base62, decode_base62
from katas.utils.logging import initialize_logging


__all__ = [
    'encode_base62',
    'decode_base62',
    'app_env',
    'running_locally',
    'log_level',
    'log_format',
    'initialize_logging',
]
