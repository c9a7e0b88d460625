"""Boolean free-text query matching over candidate records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..schemas import Candidate

QueryOperator = Literal["all", "term", "not", "and", "or"]

# Checked in this order; the first operator found governs the whole query.
_OPERATORS: tuple[tuple[QueryOperator, str], ...] = (
    ("not", " not "),
    ("and", " and "),
    ("or", " or "),
)


@dataclass(frozen=True, slots=True)
class ParsedQuery:
    """How a query string was interpreted.

    For ``not`` queries ``terms`` is ``(include, exclude)`` and ``present``
    records which sides were non-empty before quotes and spaces were removed.
    """

    operator: QueryOperator
    terms: tuple[str, ...]
    present: tuple[bool, ...] = ()


def searchable_text(candidate: Candidate) -> str:
    """Lowercase blob of the candidate fields a query is matched against."""
    parts = [
        candidate.name,
        candidate.designation,
        candidate.current_company,
        *candidate.skills,
        candidate.current_city,
        candidate.education.degree,
    ]
    return " ".join(parts).lower()


def _clean(term: str) -> str:
    return term.replace('"', "").strip()


def parse_query(query: str) -> ParsedQuery:
    if not query.strip():
        return ParsedQuery("all", ())

    lowered = query.lower()
    for operator, token in _OPERATORS:
        if token not in lowered:
            continue
        if operator == "not":
            include, exclude = lowered.split(token, 1)
            return ParsedQuery(
                operator,
                (_clean(include), _clean(exclude)),
                (bool(include), bool(exclude)),
            )
        return ParsedQuery(operator, tuple(_clean(part) for part in lowered.split(token)))

    return ParsedQuery("term", (lowered.replace('"', ""),))


def evaluate_parsed(parsed: ParsedQuery, text: str) -> bool:
    if parsed.operator == "all":
        return True
    if parsed.operator == "not":
        include, exclude = parsed.terms
        has_include, has_exclude = parsed.present
        # A quotes-only right side cleans to "", which every text contains.
        include_match = include in text if has_include else True
        exclude_match = exclude in text if has_exclude else False
        return include_match and not exclude_match
    if parsed.operator == "and":
        return all(term in text for term in parsed.terms)
    if parsed.operator == "or":
        return any(term in text for term in parsed.terms)
    return parsed.terms[0] in text


def matches_query(query: str, candidate: Candidate) -> bool:
    """Return True when ``candidate`` satisfies the Boolean ``query``.

    Supports a single operator kind per query (``NOT``, then ``AND``, then
    ``OR``), case-insensitively. Double quotes only group words; every term
    is a plain substring test. There is no nesting or mixed precedence.
    """
    return evaluate_parsed(parse_query(query), searchable_text(candidate))


class BooleanQueryMatcher:
    """Injectable wrapper around :func:`matches_query`."""

    def parse(self, query: str) -> ParsedQuery:
        return parse_query(query)

    def matches(self, query: str | ParsedQuery, candidate: Candidate) -> bool:
        parsed = query if isinstance(query, ParsedQuery) else parse_query(query)
        return evaluate_parsed(parsed, searchable_text(candidate))
