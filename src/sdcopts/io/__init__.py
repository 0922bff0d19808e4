from sdcopts.io.readers import options_to_usd_tokens, read_json_options, read_usd_options, write_usd_options
from sdcopts.io.registry import get_reader, list_readers, read_options, register_reader
from sdcopts.io.serialize import options_from_dict, options_to_dict, save_options_json


register_reader("json", read_json_options)
register_reader("usd", read_usd_options)

__all__ = [
    "register_reader",
    "get_reader",
    "list_readers",
    "read_options",
    "read_json_options",
    "read_usd_options",
    "options_to_dict",
    "options_from_dict",
    "options_to_usd_tokens",
    "write_usd_options",
    "save_options_json",
]
