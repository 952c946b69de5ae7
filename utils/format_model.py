from classes.LogicalOperator import LogicalOperator


def format_certainty(value):
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_antecedent(antecedent):
    if antecedent.operator is LogicalOperator.NONE:
        return antecedent.conditions[0].name
    return antecedent.operator.delimiter.join(antecedent.condition_names())


def format_rule(rule):
    return (
        f"{rule.rule_id}: Si {format_antecedent(rule.antecedent)} "
        f"Entonces {rule.consequent.name}, FC = {format_certainty(rule.rule_certainty_factor)}"
    )


def format_fact(fact):
    return f"{fact.name}, FC = {format_certainty(fact.certainty_factor)}"


def format_rules_file(knowledge_base):
    lines = [str(len(knowledge_base.rules))]
    lines.extend(format_rule(rule) for rule in knowledge_base.rules)
    return "\n".join(lines) + "\n"


def format_facts_file(fact_base):
    lines = [str(len(fact_base.initial_facts))]
    lines.extend(format_fact(fact) for fact in fact_base.initial_facts)
    lines.append("Objetivo")
    if fact_base.goal is not None:
        lines.append(fact_base.goal.name)
    return "\n".join(lines) + "\n"


def print_model(*, knowledge_base, fact_base, out=None):
    print(format_rules_file(knowledge_base), end="", file=out)
    print("", file=out)
    print(format_facts_file(fact_base), end="", file=out)


def format_working_memory(fact_base):
    """One "name: certainty" line per working memory entry, in insertion order"""
    return "".join(
        f"{fact_name}: {format_certainty(certainty_factor)}\n"
        for fact_name, certainty_factor in fact_base.working_memory.items()
    )


def print_working_memory(*, fact_base, out=None):
    print(format_working_memory(fact_base), end="", file=out)
