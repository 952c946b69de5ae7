class Rule:
    def __init__(self, *, rule_id, antecedent, consequent, rule_certainty_factor):
        self.rule_id = rule_id
        self.antecedent = antecedent
        self.consequent = consequent
        self.rule_certainty_factor = rule_certainty_factor

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return (
            self.rule_id == other.rule_id and
            self.antecedent == other.antecedent and
            self.consequent == other.consequent and
            self.rule_certainty_factor == other.rule_certainty_factor
        )

    def __repr__(self):
        return (
            f"Rule('{self.rule_id}', {self.antecedent} -> '{self.consequent.name}', "
            f"FC={self.rule_certainty_factor})"
        )
