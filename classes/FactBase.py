from classes.WorkingMemory import WorkingMemory


class FactBase:
    """Initial facts, the goal to evaluate, and the working memory seeded from them"""
    def __init__(self):
        self.initial_facts = []
        self.goal = None
        self.working_memory = WorkingMemory()

    def add_initial_fact(self, *, fact):
        self.initial_facts.append(fact)
        # later entries for the same name overwrite earlier ones
        self.working_memory.set_certainty(fact_name=fact.name, certainty_factor=fact.certainty_factor)

    def set_goal(self, *, fact):
        self.goal = fact

    def __repr__(self):
        goal_name = self.goal.name if self.goal is not None else None
        return f"FactBase({len(self.initial_facts)} facts, goal='{goal_name}')"
