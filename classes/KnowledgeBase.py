class KnowledgeBase:
    """Stores the rules read from a rules file, in file order"""
    def __init__(self):
        self.rules = []

    def add_rule(self, *, rule):
        self.rules.append(rule)

    def find_rules(self, *, rule_id):
        """Rule ids are not unique by grammar, so every match is returned"""
        return [rule for rule in self.rules if rule.rule_id == rule_id]

    def __iter__(self):
        return iter(self.rules)

    def __len__(self):
        return len(self.rules)

    def __repr__(self):
        return f"KnowledgeBase({len(self.rules)} rules)"
