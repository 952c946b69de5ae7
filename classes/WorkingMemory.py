class WorkingMemory:
    """Maps fact names to their currently known certainty factor.

    Iteration follows the order in which each name was first written.
    """
    def __init__(self):
        self._certainties = {}

    def set_certainty(self, *, fact_name, certainty_factor):
        self._certainties[fact_name] = certainty_factor

    def get_certainty(self, *, fact_name, default=None):
        return self._certainties.get(fact_name, default)

    def items(self):
        return self._certainties.items()

    def as_dict(self):
        return dict(self._certainties)

    def __getitem__(self, fact_name):
        return self._certainties[fact_name]

    def __contains__(self, fact_name):
        return fact_name in self._certainties

    def __iter__(self):
        return iter(self._certainties)

    def __len__(self):
        return len(self._certainties)

    def __repr__(self):
        return f"WorkingMemory({self._certainties})"
