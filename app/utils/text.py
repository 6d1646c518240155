import json
from typing import Any


def to_data_value(value: Any) -> str:
    """
    Converts a payload value to the text FCM expects in the data block,
    printed the way a JSON client would print it.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)
