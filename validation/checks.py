"""Optional checks layered on top of a successful load.

The loaders accept duplicate rule ids and any certainty value. These passes
report such cases as diagnostics without touching the loaded model.
"""
import logging

from loading.errors import Diagnostic, ErrorKind

logger = logging.getLogger(__name__)

CERTAINTY_LOWER_BOUND = -1.0
CERTAINTY_UPPER_BOUND = 1.0


def check_unique_rule_ids(knowledge_base):
    diagnostics = []
    seen = set()
    for position, rule in enumerate(knowledge_base.rules, start=1):
        if rule.rule_id in seen:
            diagnostics.append(Diagnostic(
                kind=ErrorKind.DUPLICATE_RULE_ID,
                message=f"Rule id '{rule.rule_id}' is repeated (rule #{position})",
            ))
        seen.add(rule.rule_id)
    return diagnostics


def _out_of_range(value, lower, upper):
    return value < lower or value > upper


def check_certainty_range(*, knowledge_base=None, fact_base=None,
                          lower=CERTAINTY_LOWER_BOUND, upper=CERTAINTY_UPPER_BOUND):
    diagnostics = []

    if knowledge_base is not None:
        for rule in knowledge_base.rules:
            if _out_of_range(rule.rule_certainty_factor, lower, upper):
                diagnostics.append(Diagnostic(
                    kind=ErrorKind.CERTAINTY_OUT_OF_RANGE,
                    message=(
                        f"Rule '{rule.rule_id}' has FC={rule.rule_certainty_factor}, "
                        f"outside [{lower}, {upper}]"
                    ),
                ))

    if fact_base is not None:
        for fact in fact_base.initial_facts:
            if _out_of_range(fact.certainty_factor, lower, upper):
                diagnostics.append(Diagnostic(
                    kind=ErrorKind.CERTAINTY_OUT_OF_RANGE,
                    message=f"Fact '{fact.name}' has FC={fact.certainty_factor}, outside [{lower}, {upper}]",
                ))

    return diagnostics


def run_checks(knowledge_base, fact_base, *, unique_ids=False, certainty_range=False):
    diagnostics = []
    if unique_ids:
        diagnostics.extend(check_unique_rule_ids(knowledge_base))
    if certainty_range:
        diagnostics.extend(check_certainty_range(knowledge_base=knowledge_base, fact_base=fact_base))

    for diagnostic in diagnostics:
        logger.warning("%s", diagnostic)
    return diagnostics
