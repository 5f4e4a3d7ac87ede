"""
  Stack NT tokenizer

Splits source text on whitespace while keeping two kinds of literal atomic:

    - "quoted strings", whitespace preserved, quote marks kept in the token
    - { brace blocks }, nestable, kept whole with their inner text verbatim

A quote opened inside braces is ordinary text. A `}` with no open brace is
dropped. An unterminated quote or brace at end of input drops the partial
token without raising.
"""

from __future__ import annotations

# ASCII separators plus the ideographic (full-width) space
WHITESPACE = frozenset(" 　\n\t\r")


def tokenize(source: str) -> list[str]:
    """Return the raw tokens of `source` in order."""
    tokens: list[str] = []
    current: list[str] = []
    depth = 0
    in_quote = False

    def flush() -> None:
        tokens.append("".join(current))
        current.clear()

    for c in source:
        if c == "{" and not in_quote:
            depth += 1
            current.append(c)
        elif c == "}" and not in_quote:
            if depth:
                current.append(c)
                depth -= 1
                if depth == 0:
                    flush()
        elif c == '"':
            current.append(c)
            if depth == 0:
                if in_quote:
                    flush()
                in_quote = not in_quote
        elif c in WHITESPACE:
            if depth or in_quote:
                current.append(c)
            elif current:
                flush()
        else:
            current.append(c)

    if current and not depth and not in_quote:
        flush()
    return tokens
