"""Normalisation and token primitives shared by the rule and fact loaders.

Keyword matching works on an ASCII-folded copy of a line. Folding never
changes the length of a string, so a position found in the folded copy can be
used to slice the original-case text.
"""
import re
import string

WHITESPACE = " \t\n\r\f\v"

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_COUNT_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# 'FC' ws? '=' ws?  (matched against folded text)
_FC_MARKER_RE = re.compile(r"fc[ \t]*=")


def to_lower(s):
    return s.translate(_ASCII_LOWER)


def trim(s):
    return s.strip(WHITESPACE)


def parse_count(text):
    value = trim(text)
    if not _COUNT_RE.fullmatch(value):
        raise ValueError(f"not an integer: '{value}'")
    count = int(value)
    if count < 0:
        raise ValueError(f"count cannot be negative: {count}")
    return count


def parse_certainty(text):
    value = trim(text)
    if not _NUMBER_RE.fullmatch(value):
        raise ValueError(f"not a real number: '{value}'")
    return float(value)


def find_last_fc_marker(folded):
    """Return (start, end) of the rightmost FC marker, or None"""
    last = None
    for match in _FC_MARKER_RE.finditer(folded):
        last = match
    if last is None:
        return None
    return last.start(), last.end()


def match_fc_marker(folded):
    """Return the end of an FC marker starting at position 0, or None"""
    match = _FC_MARKER_RE.match(folded)
    if match is None:
        return None
    return match.end()
