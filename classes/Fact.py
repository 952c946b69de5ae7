class Fact:
    def __init__(self, name, certainty_factor=None):
        self.name = name
        self.certainty_factor = certainty_factor

    def __eq__(self, other):
        if not isinstance(other, Fact):
            return NotImplemented
        return self.name == other.name and self.certainty_factor == other.certainty_factor

    def __hash__(self):
        return hash((self.name, self.certainty_factor))

    def __repr__(self):
        if self.certainty_factor is None:
            return f"Fact('{self.name}')"
        return f"Fact('{self.name}', FC={self.certainty_factor})"
