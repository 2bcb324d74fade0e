"""
Value parser: telemetry text -> typed Value.

Dispatch looks at the token as a whole (empty, boolean keyword, '[', '"',
otherwise number). Array bodies are split by a single left-to-right state
machine so that commas inside quoted strings and brackets inside nested arrays
never split an element.

Nested arrays are parsed depth-first with an explicit stack, so nesting depth
is not bounded by the interpreter recursion limit.

parse() is pure: no shared state, safe to call from any thread.
"""

import enum
import re
from typing import Iterator, List, Optional, Tuple

from .errors import ArrayNoClosingBracket, NothingToParse, NumberBadData, StringNoClosingQuote
from .values import Array, Boolean, Number, String, Value

# Decimal literal, or a sign followed by inf/infinity/nan (any case)
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[+-](?i:inf|infinity|nan)"
)

# Skipped between array elements
_ELEMENT_SEPARATORS = frozenset(", \t\r\n")

# End a number/boolean element
_SCALAR_TERMINATORS = frozenset(",]")


class _State(enum.Enum):
    BEGIN = "begin"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    STRING = "string"


def parse(text: str) -> Value:
    """
    Parse one telemetry token into a typed value.

    Grammar:
    - "true" / "false" (exact, case-sensitive) -> Boolean
    - "[...]" -> Array of comma-separated tokens, arbitrary nesting
    - '"..."' -> String of everything between the outer quotes (no escaping)
    - anything else -> Number (decimal float literal, or signed inf/nan)

    Args:
        text: Token to parse

    Returns:
        Number, String, Boolean or Array

    Raises:
        NothingToParse: token is empty
        ArrayNoClosingBracket: starts with '[' but does not end with ']'
        StringNoClosingQuote: starts with '"' but does not end with '"'
        NumberBadData: not a float literal (also raised from nested elements)
    """
    value = _parse_flat(text)
    if value is not None:
        return value

    # Elements are parsed in encounter order, depth-first; the first failure
    # propagates and no partial array is returned.
    stack: List[Tuple[List[Value], Iterator[str]]] = [([], iter(_split_array_body(text[1:-1])))]
    while True:
        items, tokens = stack[-1]
        token = next(tokens, None)
        if token is None:
            stack.pop()
            if not stack:
                return Array(tuple(items))
            stack[-1][0].append(Array(tuple(items)))
            continue

        value = _parse_flat(token)
        if value is None:
            stack.append(([], iter(_split_array_body(token[1:-1]))))
        else:
            items.append(value)


def _parse_flat(text: str) -> Optional[Value]:
    """Parse a non-array token; None for a well-formed array token."""
    if not text:
        raise NothingToParse(text)

    if text == "true" or text == "false":
        return Boolean(text == "true")

    first = text[0]
    if first == "[":
        if len(text) < 2 or text[-1] != "]":
            raise ArrayNoClosingBracket(text)
        return None

    if first == '"':
        if len(text) < 2 or text[-1] != '"':
            raise StringNoClosingQuote(text)
        return String(text[1:-1])

    if _FLOAT_LITERAL.fullmatch(text) is None:
        raise NumberBadData(text)
    return Number(float(text))


def _classify(char: str) -> _State:
    if char == "[":
        return _State.ARRAY
    if char == '"':
        return _State.STRING
    if char.isalpha():
        return _State.BOOLEAN
    # digits, sign and '.' start numbers; anything else fails the numeric parse
    return _State.NUMBER


def _split_array_body(body: str) -> List[str]:
    """
    Split the text between an array's outer brackets into element tokens.

    Element closing rules:
    - NUMBER / BOOLEAN: the next ',' or ']' (not part of the element)
    - STRING: the second '"'
    - ARRAY: the ']' that returns bracket depth to 0; brackets inside quoted
      strings do not count

    Splitting never fails; unterminated elements are returned as-is and
    rejected when parsed.
    """
    tokens: List[str] = []
    state = _State.BEGIN
    buf: List[str] = []
    depth = 0
    quoted = False

    for char in body:
        if state is _State.BEGIN:
            if char in _ELEMENT_SEPARATORS:
                continue
            buf = [char]
            state = _classify(char)
            depth = 1
            quoted = False
            continue

        if state is _State.ARRAY:
            buf.append(char)
            if char == '"':
                quoted = not quoted
            elif quoted:
                continue
            elif char == "[":
                depth += 1
            elif char == "]":
                depth -= 1
                if depth == 0:
                    tokens.append("".join(buf))
                    state = _State.BEGIN
        elif state is _State.STRING:
            buf.append(char)
            if char == '"':
                tokens.append("".join(buf))
                state = _State.BEGIN
        elif char in _SCALAR_TERMINATORS:
            tokens.append("".join(buf).rstrip())
            state = _State.BEGIN
        else:
            buf.append(char)

    # Last element has no trailing separator
    if state is not _State.BEGIN:
        tokens.append("".join(buf).rstrip())

    return tokens
