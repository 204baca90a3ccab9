"""
Parsing of the comma separated dataset typed into the dashboard
"""

import math


def _to_number(text):
    # int()/float() also take digit separators and non-ASCII digits
    if '_' in text or not text.isascii():
        return None
    if text.lstrip('+-')[:2].lower() == '0x':
        try:
            return int(text, 16)
        except ValueError:
            return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def parse_values(text):
    """
    Split, trim and convert a comma separated list of numbers

    Entries that are empty or not numbers are dropped. A ``0x`` prefix
    reads as hexadecimal.

    Args:
        text: raw input, e.g. "10, 20,30"

    Returns:
        list: ints for integral values, floats otherwise
    """
    if not text:
        return []

    numbers = []
    for part in text.split(','):
        part = part.strip()
        if not part:
            continue
        number = _to_number(part)
        if number is not None:
            numbers.append(number)
    return numbers
