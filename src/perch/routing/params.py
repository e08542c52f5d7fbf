"""Path parameter converters.

Built-in converters for route segments like ``{id:int}``. Values are
always bound as strings; a converter only decides whether a
percent-decoded segment matches.
"""

import re

# regex pattern for each supported converter
CONVERTERS: dict[str, str] = {
    "str": r".+",
    "int": r"\d+",
    "path": r".*",
}

_COMPILED: dict[str, re.Pattern[str]] = {
    name: re.compile(f"^{pattern}$") for name, pattern in CONVERTERS.items()
}


def accepts(param_type: str, value: str) -> bool:
    """True if *value* is a valid segment for *param_type*.

    Raises ``KeyError`` if *param_type* is not a registered converter.
    """
    return _COMPILED[param_type].match(value) is not None
