"""String case helpers used for flag names.

    decamelize("innerHTML")     -> "inner_html"
    dasherize("myOption")       -> "my-option"
"""

import re

_DECAMELIZE_RE = re.compile(r"([a-z\d])([A-Z])")
_DASHERIZE_RE = re.compile(r"[ _]")


def decamelize(value: str) -> str:
    """Convert camelCase to lower_snake_case."""
    return _DECAMELIZE_RE.sub(r"\1_\2", value).lower()


def dasherize(value: str) -> str:
    """Convert camelCase, snake_case or spaced words to kebab-case."""
    return _DASHERIZE_RE.sub("-", decamelize(value))
