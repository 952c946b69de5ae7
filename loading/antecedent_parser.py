from classes.Antecedent import Antecedent
from classes.Fact import Fact
from classes.LogicalOperator import LogicalOperator
from loading.errors import ErrorKind, ParseError
from loading.text import to_lower, trim


def _split_on(text, folded, delimiter):
    literals = []
    start = 0
    position = folded.find(delimiter)
    while position != -1:
        literals.append(trim(text[start:position]))
        start = position + len(delimiter)
        position = folded.find(delimiter, start)
    literals.append(trim(text[start:]))
    return literals


def _select_operator(folded):
    # Substring search, not word based: the first delimiter found wins and the
    # other one, if present, stays inside the literals.
    and_position = folded.find(LogicalOperator.AND.delimiter)
    or_position = folded.find(LogicalOperator.OR.delimiter)

    if and_position != -1 and (or_position == -1 or and_position < or_position):
        return LogicalOperator.AND
    if or_position != -1:
        return LogicalOperator.OR
    return LogicalOperator.NONE


def parse_antecedent(text):
    folded = to_lower(text)
    operator = _select_operator(folded)

    if operator is LogicalOperator.NONE:
        literals = [trim(text)]
    else:
        literals = _split_on(text, folded, operator.delimiter)

    conditions = []
    for index, literal in enumerate(literals, start=1):
        if not literal:
            raise ParseError(
                kind=ErrorKind.EMPTY_LITERAL,
                message=f"Empty literal #{index} of {len(literals)} in antecedent",
                text=text,
            )
        conditions.append(Fact(literal))

    if not conditions:
        raise ParseError(kind=ErrorKind.EMPTY_LITERAL, message="Antecedent has no literals", text=text)

    return Antecedent(conditions=conditions, operator=operator)
