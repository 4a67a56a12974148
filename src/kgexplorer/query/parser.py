"""
Parser for the restricted Cypher-like pattern query.

Accepted surface:

    MATCH (s)-[p]->(o)
    MATCH (s)-[p]->(o) WHERE s = "microgravity"

The three placeholders are free text and ignored. At most one equality
condition over subject, predicate or object is extracted from WHERE.
Validation failures are returned as values, never raised.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

EXAMPLE_QUERY = 'MATCH (s)-[p]->(o) WHERE s = "value"'

# MATCH (<any>)-[<any>]->(<any>), placeholders never span lines
MATCH_PATTERN = re.compile(
    r"MATCH\s*"
    r"\((?P<subject>[^\n]*?)\)\s*"
    r"-\s*\[(?P<predicate>[^\n]*?)\]\s*-\s*>\s*"
    r"\((?P<object>[^\n]*?)\)",
    re.IGNORECASE,
)

# WHERE followed by the rest of its line
WHERE_PATTERN = re.compile(r"WHERE\s+(?P<condition>[^\n]+)", re.IGNORECASE)

QUOTE_CHARS = re.compile(r"[\"']")


class QueryField(str, Enum):
    """Triple field a condition compares against."""

    SUBJECT = "subject"
    PREDICATE = "predicate"
    OBJECT = "object"


FIELD_ALIASES: dict[str, QueryField] = {
    "s": QueryField.SUBJECT,
    "subject": QueryField.SUBJECT,
    "p": QueryField.PREDICATE,
    "predicate": QueryField.PREDICATE,
    "o": QueryField.OBJECT,
    "object": QueryField.OBJECT,
}


class ParseErrorKind(str, Enum):
    """Kinds of query validation failure."""

    INVALID_SYNTAX = "invalid_syntax"
    INVALID_WHERE_CLAUSE = "invalid_where_clause"
    UNKNOWN_FIELD = "unknown_field"


class QueryError(ValueError):
    """Raised by ParseResult.unwrap() for callers that want exceptions."""

    def __init__(self, error: "ParseError") -> None:
        super().__init__(error.message)
        self.error = error


@dataclass(frozen=True)
class Condition:
    """Single case-insensitive equality: <field> = <value>."""

    field: QueryField
    value: str

    def to_dict(self) -> dict:
        return {"field": self.field.value, "value": self.value}


@dataclass(frozen=True)
class ParseError:
    """A validation failure with its user-facing message."""

    kind: ParseErrorKind
    message: str
    token: str | None = None  # Offending token, for UNKNOWN_FIELD


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a query.

    Exactly one of these holds:
    - empty: the query was blank, caller should clear its results
    - error is set: validation failed
    - otherwise: condition is the extracted equality, or None to match all
    """

    condition: Condition | None = None
    error: ParseError | None = None
    empty: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Condition | None:
        """Return the condition or raise QueryError."""
        if self.error is not None:
            raise QueryError(self.error)
        return self.condition


def _fail(kind: ParseErrorKind, message: str, token: str | None = None) -> ParseResult:
    logger.debug(f"Query rejected ({kind.value}): {message}")
    return ParseResult(error=ParseError(kind=kind, message=message, token=token))


def normalize_field(token: str) -> QueryField | None:
    """Map the exact tokens s/subject, p/predicate, o/object to a field."""
    return FIELD_ALIASES.get(token.strip())


def parse_condition(text: str) -> ParseResult:
    """Parse the text after WHERE into a single equality condition."""
    condition = QUOTE_CHARS.sub("", text).strip()

    parts = [part.strip() for part in condition.split("=")]
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return _fail(
            ParseErrorKind.INVALID_WHERE_CLAUSE,
            'Invalid WHERE clause. Example: WHERE s = "covid-19"',
        )

    lhs, rhs = parts
    field = normalize_field(lhs)
    if field is None:
        return _fail(
            ParseErrorKind.UNKNOWN_FIELD,
            f'Unknown field "{lhs}". Use s, p, or o.',
            token=lhs,
        )

    return ParseResult(condition=Condition(field=field, value=rhs))


def parse_query(query: str) -> ParseResult:
    """
    Validate a query and extract its condition.

    Args:
        query: Raw user text

    Returns:
        ParseResult - empty for blank input, an error for invalid input,
        otherwise the condition (None when there is no WHERE clause)
    """
    if not query or not query.strip():
        return ParseResult(empty=True)

    if not MATCH_PATTERN.search(query):
        return _fail(
            ParseErrorKind.INVALID_SYNTAX,
            f"Invalid syntax. Use: {EXAMPLE_QUERY}",
        )

    where = WHERE_PATTERN.search(query)
    if where is None:
        return ParseResult(condition=None)

    return parse_condition(where.group("condition"))
