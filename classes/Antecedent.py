from classes.LogicalOperator import LogicalOperator


class Antecedent:
    """The "Si" part of a rule: one or more conditions joined by a single operator"""
    def __init__(self, *, conditions, operator=LogicalOperator.NONE):
        if not conditions:
            raise ValueError("An antecedent needs at least one condition")
        if operator is LogicalOperator.NONE and len(conditions) != 1:
            raise ValueError(
                f"An antecedent without operator must have exactly one condition, got {len(conditions)}"
            )
        self.conditions = list(conditions)
        self.operator = operator

    def condition_names(self):
        return [condition.name for condition in self.conditions]

    def __eq__(self, other):
        if not isinstance(other, Antecedent):
            return NotImplemented
        return self.operator is other.operator and self.conditions == other.conditions

    def __repr__(self):
        return f"Antecedent({self.operator.name}, {self.condition_names()})"
