from enum import Enum


class LogicalOperator(Enum):
    """How the conditions of an antecedent are combined"""
    NONE = None
    AND = "y"
    OR = "o"

    @property
    def delimiter(self):
        if self.value is None:
            return None
        return f" {self.value} "
