import logging

from classes.Fact import Fact
from classes.FactBase import FactBase
from loading.errors import ErrorKind, LoadError
from loading.line_reader import LineReader, count_mismatch, next_entry_line, read_declared_count
from loading.sources import open_source, source_name as get_source_name
from loading.text import match_fc_marker, parse_certainty, to_lower, trim

logger = logging.getLogger(__name__)

FACT_DELIMITER = ","
GOAL_KEYWORD = "objetivo"


def _line_error(kind, message, *, source_name, line_number, line):
    return LoadError(kind=kind, message=message, source_name=source_name, line_number=line_number, line=line)


def parse_fact_line(line, *, source_name=None, line_number=None):
    """Parse a "<name>, FC = <number>" line into a Fact.

    The rightmost comma separates the name, so names may contain commas. The
    FC marker must follow that comma directly.
    """
    line = trim(line)
    location = dict(source_name=source_name, line_number=line_number, line=line)

    comma = line.rfind(FACT_DELIMITER)
    if comma == -1:
        raise _line_error(ErrorKind.MISSING_DELIMITER, "Fact is missing ',' before 'FC='", **location)

    name = trim(line[:comma])
    if not name:
        raise _line_error(ErrorKind.EMPTY_CLAUSE, "Fact name is empty", **location)

    suffix = trim(line[comma + 1:])
    marker_end = match_fc_marker(to_lower(suffix))
    if marker_end is None:
        raise _line_error(
            ErrorKind.MISSING_KEYWORD,
            f"Fact '{name}' is missing 'FC=' right after the last ','",
            **location,
        )

    value_text = trim(suffix[marker_end:])
    try:
        certainty_factor = parse_certainty(value_text)
    except ValueError:
        raise _line_error(
            ErrorKind.INVALID_NUMBER,
            f"Invalid certainty factor '{value_text}' for fact '{name}'",
            **location,
        ) from None

    return Fact(name, certainty_factor)


def _is_fact_line(line):
    comma = line.rfind(FACT_DELIMITER)
    if comma == -1 or not trim(line[:comma]):
        return False
    return match_fc_marker(to_lower(trim(line[comma + 1:]))) is not None


def _read_goal_keyword(reader, *, source_name):
    """Skip to the 'Objetivo' line and return the line numbers of surplus fact lines on the way"""
    surplus = []
    while True:
        line = reader.next_non_blank()
        if line is None:
            raise LoadError(
                kind=ErrorKind.UNEXPECTED_EOF,
                message="Keyword 'Objetivo' not found",
                source_name=source_name,
                line_number=reader.line_number,
            )
        if to_lower(line) == GOAL_KEYWORD:
            return surplus
        if _is_fact_line(line):
            surplus.append(reader.line_number)
            continue
        raise _line_error(
            ErrorKind.MISSING_KEYWORD,
            "Expected keyword 'Objetivo'",
            source_name=source_name,
            line_number=reader.line_number,
            line=line,
        )


def load_facts(source, *, fact_base=None, diagnostics=None):
    """Load a facts file into a FactBase and seed its working memory.

    `source` is a path or an open text stream. Raises LoadError on the first
    malformed line.
    """
    if fact_base is None:
        fact_base = FactBase()
    name = get_source_name(source)

    with open_source(source) as lines:
        reader = LineReader(lines, source_name=name)
        expected = read_declared_count(reader, source_name=name, entry_label="facts")

        for read in range(expected):
            line = next_entry_line(reader, source_name=name, entry_label="facts", expected=expected, read=read)
            fact = parse_fact_line(line, source_name=name, line_number=reader.line_number)
            fact_base.add_initial_fact(fact=fact)
            logger.debug("Loaded fact %s (FC=%s) from %s:%d", fact.name, fact.certainty_factor, name, reader.line_number)

        surplus = _read_goal_keyword(reader, source_name=name)

        goal_name = reader.next_non_blank()
        if goal_name is None:
            raise LoadError(
                kind=ErrorKind.EMPTY_CLAUSE,
                message="Goal fact missing after keyword 'Objetivo'",
                source_name=name,
                line_number=reader.line_number,
            )
        fact_base.set_goal(fact=Fact(goal_name))

    if surplus:
        diagnostic = count_mismatch(
            expected=expected, surplus_line_numbers=surplus, source_name=name, entry_label="facts"
        )
        logger.warning("%s", diagnostic)
        if diagnostics is not None:
            diagnostics.append(diagnostic)

    logger.info("Loaded %d facts from %s, goal '%s'", expected, name, fact_base.goal.name)
    return fact_base
