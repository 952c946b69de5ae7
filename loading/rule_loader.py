import logging

from classes.Fact import Fact
from classes.KnowledgeBase import KnowledgeBase
from classes.Rule import Rule
from loading.antecedent_parser import parse_antecedent
from loading.errors import ErrorKind, LoadError, ParseError
from loading.line_reader import LineReader, count_mismatch, next_entry_line, read_declared_count
from loading.sources import open_source, source_name as get_source_name
from loading.text import find_last_fc_marker, parse_certainty, to_lower, trim

logger = logging.getLogger(__name__)

ID_DELIMITER = ":"
CLAUSE_DELIMITER = ","
IF_MARKER = "si "
THEN_MARKER = " entonces "


class _RuleLineParser:
    def __init__(self, *, source_name, line_number, line):
        self.source_name = source_name
        self.line_number = line_number
        self.line = line

    def _error(self, kind, message):
        return LoadError(
            kind=kind,
            message=message,
            source_name=self.source_name,
            line_number=self.line_number,
            line=self.line,
        )

    def parse(self):
        line = self.line

        # 1. rule id
        colon = line.find(ID_DELIMITER)
        if colon == -1:
            raise self._error(ErrorKind.MISSING_DELIMITER, "Rule is missing ':' after its id")
        rule_id = trim(line[:colon])
        if not rule_id:
            raise self._error(ErrorKind.EMPTY_CLAUSE, "Rule id is empty")
        body = trim(line[colon + 1:])

        # 2. rule certainty factor, taken from the rightmost FC= marker
        folded_body = to_lower(body)
        marker = find_last_fc_marker(folded_body)
        if marker is None:
            raise self._error(ErrorKind.MISSING_FC_MARKER, f"Rule '{rule_id}' is missing 'FC='")
        marker_start, marker_end = marker

        comma = body.rfind(CLAUSE_DELIMITER, 0, marker_start + 1)
        if comma == -1:
            raise self._error(ErrorKind.MISSING_DELIMITER, f"Rule '{rule_id}' is missing ',' before 'FC='")

        value_text = trim(body[marker_end:])
        try:
            rule_certainty_factor = parse_certainty(value_text)
        except ValueError:
            raise self._error(
                ErrorKind.INVALID_NUMBER,
                f"Invalid certainty factor '{value_text}' in rule '{rule_id}'",
            ) from None

        # 3. "Si <antecedent> Entonces <consequent>"
        clause = trim(body[:comma])
        folded_clause = to_lower(clause)
        if not folded_clause.startswith(IF_MARKER):
            raise self._error(ErrorKind.MISSING_KEYWORD, f"Rule '{rule_id}' must start with 'Si'")

        then_position = folded_clause.find(THEN_MARKER, len(IF_MARKER))
        if then_position == -1:
            raise self._error(ErrorKind.MISSING_KEYWORD, f"Rule '{rule_id}' is missing 'Entonces'")

        antecedent_text = trim(clause[len(IF_MARKER):then_position])
        consequent_name = trim(clause[then_position + len(THEN_MARKER):])
        if not antecedent_text:
            raise self._error(ErrorKind.EMPTY_CLAUSE, f"Empty antecedent in rule '{rule_id}'")
        if not consequent_name:
            raise self._error(ErrorKind.EMPTY_CLAUSE, f"Empty consequent in rule '{rule_id}'")

        try:
            antecedent = parse_antecedent(antecedent_text)
        except ParseError as error:
            raise LoadError.from_parse_error(
                error,
                message=f"Invalid antecedent in rule '{rule_id}'",
                source_name=self.source_name,
                line_number=self.line_number,
                line=self.line,
            ) from error

        return Rule(
            rule_id=rule_id,
            antecedent=antecedent,
            consequent=Fact(consequent_name),
            rule_certainty_factor=rule_certainty_factor,
        )


def parse_rule_line(line, *, source_name=None, line_number=None):
    """Parse a single "<id>: Si ... Entonces ..., FC = <number>" line into a Rule"""
    return _RuleLineParser(source_name=source_name, line_number=line_number, line=trim(line)).parse()


def load_rules(source, *, knowledge_base=None, diagnostics=None):
    """Load a rules file into a KnowledgeBase.

    `source` is a path or an open text stream. Raises LoadError on the first
    malformed line. A declared count lower than the number of rule lines
    present is only reported as a CountMismatch diagnostic: the surplus lines
    are not loaded.
    """
    if knowledge_base is None:
        knowledge_base = KnowledgeBase()
    name = get_source_name(source)

    with open_source(source) as lines:
        reader = LineReader(lines, source_name=name)
        expected = read_declared_count(reader, source_name=name, entry_label="rules")

        for read in range(expected):
            line = next_entry_line(reader, source_name=name, entry_label="rules", expected=expected, read=read)
            rule = _RuleLineParser(source_name=name, line_number=reader.line_number, line=line).parse()
            knowledge_base.add_rule(rule=rule)
            logger.debug("Loaded rule %s from %s:%d", rule.rule_id, name, reader.line_number)

        surplus = [line_number for line_number, _ in reader.remaining_non_blank()]

    if surplus:
        diagnostic = count_mismatch(
            expected=expected, surplus_line_numbers=surplus, source_name=name, entry_label="rules"
        )
        logger.warning("%s", diagnostic)
        if diagnostics is not None:
            diagnostics.append(diagnostic)

    logger.info("Loaded %d rules from %s", expected, name)
    return knowledge_base
