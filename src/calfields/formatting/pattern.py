"""
calfields.formatting.pattern
----------------------------
Pattern-based formatting and lexical parsing of calendrical values.

Pattern letters:
    yyyy   year, exactly four digits
    M, MM  month-of-year, one-or-two / exactly two digits
    d, dd  day-of-month, one-or-two / exactly two digits
    '...'  quoted literal text ('' is a single quote)

Any other run of non-letter characters is literal text. Parsing here is
purely lexical: it turns text into raw integers per rule and leaves range
and consistency checks to the value type that consumes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple, TypeVar, Union

from ..core.errors import CalendricalParseError, require_not_none
from ..core.query import require
from ..core.rules import DAY_OF_MONTH, MONTH_OF_YEAR, YEAR, FieldRule

T = TypeVar("T")

_DIGITS = "0123456789"

# letter -> (rule, {run length: (min width, max width)})
_LETTERS: Dict[str, Tuple[FieldRule, Dict[int, Tuple[int, int]]]] = {
    "y": (YEAR, {4: (4, 4)}),
    "M": (MONTH_OF_YEAR, {1: (1, 2), 2: (2, 2)}),
    "d": (DAY_OF_MONTH, {1: (1, 2), 2: (2, 2)}),
}


@dataclass(frozen=True)
class _Literal:
    text: str

    def pattern(self) -> str:
        if any(c.isalpha() or c == "'" for c in self.text):
            return "'" + self.text.replace("'", "''") + "'"
        return self.text


@dataclass(frozen=True)
class _Number:
    rule: FieldRule
    min_width: int
    max_width: int
    letters: str

    def pattern(self) -> str:
        return self.letters


_Token = Union[_Literal, _Number]


def _compile(pattern: str) -> Tuple[_Token, ...]:
    tokens: list[_Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(_Literal("".join(literal)))
            literal.clear()

    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            j = i + 1
            while True:
                if j >= n:
                    raise ValueError(f"Pattern ends with an incomplete literal: {pattern!r}")
                if pattern[j] == "'":
                    if j + 1 < n and pattern[j + 1] == "'":
                        literal.append("'")
                        j += 2
                        continue
                    break
                literal.append(pattern[j])
                j += 1
            if j == i + 1:
                literal.append("'")
            i = j + 1
        elif ch.isalpha():
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            count = j - i
            if ch not in _LETTERS or count not in _LETTERS[ch][1]:
                raise ValueError(f"Unsupported pattern letters '{ch * count}' in {pattern!r}")
            flush()
            rule, widths = _LETTERS[ch]
            lo, hi = widths[count]
            tokens.append(_Number(rule, lo, hi, ch * count))
            i = j
        else:
            literal.append(ch)
            i += 1
    flush()
    return tuple(tokens)


class DateTimeFormatter:
    """Immutable formatter/parser compiled from a pattern string."""

    def __init__(self, tokens: Tuple[_Token, ...]):
        self._tokens = tokens

    @classmethod
    def of_pattern(cls, pattern: str) -> "DateTimeFormatter":
        require_not_none(pattern, "pattern")
        return cls(_compile(pattern))

    @property
    def pattern(self) -> str:
        return "".join(t.pattern() for t in self._tokens)

    @property
    def rules(self) -> Tuple[FieldRule, ...]:
        return tuple(t.rule for t in self._tokens if isinstance(t, _Number))

    def format(self, calendrical: Any) -> str:
        """Render every numeric token from ``calendrical``; missing rules raise UnsupportedRuleError."""
        require_not_none(calendrical, "calendrical")
        out: list[str] = []
        for tok in self._tokens:
            if isinstance(tok, _Literal):
                out.append(tok.text)
            else:
                out.append(str(require(calendrical, tok.rule).value).zfill(tok.min_width))
        return "".join(out)

    def parse_fields(self, text: str) -> Dict[FieldRule, int]:
        require_not_none(text, "text")
        fields: Dict[FieldRule, int] = {}
        pos = 0
        for tok in self._tokens:
            if isinstance(tok, _Literal):
                if not text.startswith(tok.text, pos):
                    raise CalendricalParseError(f"Expected '{tok.text}'", text, pos)
                pos += len(tok.text)
                continue
            end = pos
            while end < len(text) and end - pos < tok.max_width and text[end] in _DIGITS:
                end += 1
            if end - pos < tok.min_width:
                raise CalendricalParseError(
                    f"Expected {tok.min_width} digit(s) for {tok.rule.name}", text, pos
                )
            fields[tok.rule] = int(text[pos:end])
            pos = end
        if pos != len(text):
            raise CalendricalParseError("Unparsed text found", text, pos)
        return fields

    def parse(self, text: str, factory: Callable[[Dict[FieldRule, int]], T]) -> T:
        return factory(self.parse_fields(text))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimeFormatter):
            return NotImplemented
        return self._tokens == other._tokens

    def __hash__(self) -> int:
        return hash(self._tokens)

    def __repr__(self) -> str:
        return f"DateTimeFormatter({self.pattern!r})"


def pattern(text: str) -> DateTimeFormatter:
    return DateTimeFormatter.of_pattern(text)


ISO_MONTH_DAY = DateTimeFormatter.of_pattern("--MM-dd")
ISO_LOCAL_DATE = DateTimeFormatter.of_pattern("yyyy-MM-dd")
