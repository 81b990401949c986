import re

# Whitespace is stripped before matching, so the grammars carry none.
HSV_PATTERN = re.compile(r"hsva?\((\d+),(\d+)%,(\d+)%,?([\d.]+)?\)")
HSL_PATTERN = re.compile(r"hsla?\((\d+),(\d+)%,(\d+)%,?([\d.]+)?\)")
RGB_PATTERN = re.compile(r"rgba?\((\d+),(\d+),(\d+),?([\d.]+)?\)")
WHITESPACE = re.compile(r"\s+")
