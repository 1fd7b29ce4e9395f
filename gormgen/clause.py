"""Helpers that assemble dynamic SQL clauses (WHERE, SET, trimming)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable

__all__ = [
    "Cond",
    "if_clause",
    "where_clause",
    "set_clause",
    "trim_all",
    "join_where",
    "join_set",
    "join_trim_all",
]

_LEADING = (("and ", 4), ("or ", 3), ("xor ", 4), (",", 1))
_TRAILING = ((" and", 3), (" or", 2), (" xor", 3), (",", 1))
_CONNECTORS = ("and ", "or ", "xor ")


@dataclass(frozen=True)
class Cond:
    """A SQL fragment that is used only when ``cond`` holds."""

    cond: bool
    result: str


def if_clause(conds: Iterable[Cond]) -> str:
    """Join the results of all holding conditions, space separated."""
    parts = [c.result.strip(" ") if c.cond else "" for c in conds]
    return " " + " ".join(parts)


def where_clause(conds: Iterable[str]) -> str:
    """Build a `` WHERE ...`` clause, or an empty string if nothing remains."""
    return _join_clause(conds, "WHERE", _where_value, " ")


def set_clause(conds: Iterable[str]) -> str:
    """Build a `` SET ...`` clause, or an empty string if nothing remains."""
    return _join_clause(conds, "SET", _set_value, ",")


def _join_clause(
    conds: Iterable[str], keyword: str, deal: Callable[[str], str], sep: str
) -> str:
    sql = trim_all(sep.join(deal(c) for c in conds))
    return f" {keyword} {sql}" if sql else sql


def trim_all(text: str) -> str:
    """Drop one leading and one trailing connector (AND, OR, XOR or comma)."""
    return _trim_right(_trim_left(text))


def _trim_left(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    for prefix, size in _LEADING:
        if lower.startswith(prefix):
            return text[size:]
    return text


def _trim_right(text: str) -> str:
    text = text.strip()
    lower = text.lower()
    for suffix, size in _TRAILING:
        if lower.endswith(suffix):
            return text[: len(text) - size]
    return text


def _where_value(value: str) -> str:
    value = value.strip(" ")
    lower = value.lower()
    if not lower:
        return ""
    if lower.startswith(_CONNECTORS):
        return value
    return "AND " + value


def _set_value(value: str) -> str:
    return value.strip(", ")


def join_where(value: str) -> str:
    """Return ``WHERE <trimmed value> `` or an empty string."""
    value = trim_all(value)
    return f"WHERE {value} " if value else ""


def join_set(value: str) -> str:
    """Return ``SET <trimmed value> `` or an empty string."""
    value = trim_all(value)
    return f"SET {value} " if value else ""


def join_trim_all(value: str) -> str:
    """Return the trimmed value followed by a space."""
    return trim_all(value) + " "