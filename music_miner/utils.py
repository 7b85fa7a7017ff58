import re

from typing import Optional, List

_LEADING_INT = re.compile(r"\s*(\d+)")

def parse_leading_int(value) -> Optional[int]:
    """Parse the integer a tag value starts with ("2000-05-01" -> 2000, "3/12" -> 3)"""
    if value is None:
        return None

    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))

def first_text(values) -> Optional[str]:
    """Return the first non-blank entry of a tag value, stripped"""
    if values is None:
        return None
    if isinstance(values, str):
        values = [values]

    for value in values:
        text = str(value).strip()
        if text:
            return text
    return None

def text_list(values) -> List[str]:
    if values is None:
        return []
    if isinstance(values, str):
        values = [values]
    return [str(v).strip() for v in values if str(v).strip()]
