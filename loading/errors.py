from enum import Enum


class ErrorKind(Enum):
    INVALID_COUNT = "InvalidCount"
    UNEXPECTED_EOF = "UnexpectedEOF"
    MISSING_DELIMITER = "MissingDelimiter"
    MISSING_KEYWORD = "MissingKeyword"
    MISSING_FC_MARKER = "MissingFCMarker"
    EMPTY_CLAUSE = "EmptyClause"
    EMPTY_LITERAL = "EmptyLiteral"
    INVALID_NUMBER = "InvalidNumber"
    INVALID_ENCODING = "InvalidEncoding"
    # non-fatal
    COUNT_MISMATCH = "CountMismatch"
    DUPLICATE_RULE_ID = "DuplicateRuleId"
    CERTAINTY_OUT_OF_RANGE = "CertaintyOutOfRange"

    @property
    def is_missing_keyword(self):
        return self in (ErrorKind.MISSING_KEYWORD, ErrorKind.MISSING_FC_MARKER)


def _location(source_name, line_number):
    if source_name and line_number is not None:
        return f"{source_name}:{line_number}: "
    if source_name:
        return f"{source_name}: "
    if line_number is not None:
        return f"line {line_number}: "
    return ""


class ParseError(Exception):
    """A piece of text does not follow the rule/fact grammar"""
    def __init__(self, *, kind, message, text=None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.text = text

    def __str__(self):
        if self.text is None:
            return f"[{self.kind.value}] {self.message}"
        return f"[{self.kind.value}] {self.message}: '{self.text}'"


class LoadError(ParseError):
    """A rules or facts file could not be loaded. Carries where it went wrong."""
    def __init__(self, *, kind, message, source_name=None, line_number=None, line=None):
        super().__init__(kind=kind, message=message, text=line)
        self.source_name = source_name
        self.line_number = line_number
        self.line = line

    @classmethod
    def from_parse_error(cls, error, *, message, source_name, line_number, line):
        return cls(
            kind=error.kind,
            message=f"{message}: {error.message}",
            source_name=source_name,
            line_number=line_number,
            line=line,
        )

    def __str__(self):
        return _location(self.source_name, self.line_number) + super().__str__()


class Diagnostic:
    """A non-fatal finding. The load (or check) that produced it still succeeds."""
    def __init__(self, *, kind, message, source_name=None, line_number=None):
        self.kind = kind
        self.message = message
        self.source_name = source_name
        self.line_number = line_number

    def __str__(self):
        return f"{_location(self.source_name, self.line_number)}[{self.kind.value}] {self.message}"

    def __repr__(self):
        return f"Diagnostic({self.kind.name}, '{self.message}')"
