from .json_file import read_json_options
from .usd import options_to_usd_tokens, read_usd_options, write_usd_options

__all__ = ["read_json_options", "read_usd_options", "options_to_usd_tokens", "write_usd_options"]
