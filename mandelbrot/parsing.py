def parse_pair(s, separator, parse=float):
    """
    Parse a pair of values separated by `separator` from the string `s`, e.g. "10,20" or "1000x750".

    Only the first occurrence of the separator splits the string, so "10,20,30" leaves "20,30" on the
    right, which does not parse. Returns a (left, right) tuple, or None if either side fails to parse.
    """
    if len(separator) != 1:
        raise ValueError(f"Separator must be a single character, got {separator!r}")

    index = s.find(separator)
    if index == -1:
        return None

    left = _parse_component(s[:index], parse)
    right = _parse_component(s[index + 1:], parse)
    if left is None or right is None:
        return None
    return left, right


def _parse_component(text, parse):
    # int() and float() tolerate padding and digit-group underscores, the textual form does not
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return parse(text)
    except ValueError:
        return None


def parse_complex(s):
    """Parse a complex number from a string of the form "re,im"."""
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    re, im = pair
    return complex(re, im)


def parse_bounds(s):
    """Parse image dimensions from a string of the form "<width>x<height>"."""
    return parse_pair(s, "x", int)
