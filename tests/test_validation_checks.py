from io import StringIO

from loading.errors import ErrorKind
from loading.fact_loader import load_facts
from loading.rule_loader import load_rules
from validation.checks import check_certainty_range, check_unique_rule_ids, run_checks


RULES = (
    "3\n"
    "R1: Si a Entonces b, FC = 0.5\n"
    "R2: Si c Entonces d, FC = 1.5\n"
    "R1: Si e Entonces f, FC = -1\n"
)

FACTS = "2\na, FC = -2\nc, FC = 1\nObjetivo\nb\n"


def _kb():
    return load_rules(StringIO(RULES))


def _fb():
    return load_facts(StringIO(FACTS))


class TestUniqueRuleIds:
    def test_reports_repeats_only(self):
        diagnostics = check_unique_rule_ids(_kb())
        assert len(diagnostics) == 1
        assert diagnostics[0].kind is ErrorKind.DUPLICATE_RULE_ID
        assert "R1" in diagnostics[0].message

    def test_loader_accepts_duplicates(self):
        assert len(_kb()) == 3


class TestCertaintyRange:
    def test_rules_and_facts(self):
        diagnostics = check_certainty_range(knowledge_base=_kb(), fact_base=_fb())
        messages = [d.message for d in diagnostics]
        assert len(diagnostics) == 2
        assert any("R2" in message for message in messages)
        assert any("'a'" in message for message in messages)

    def test_bounds_inclusive(self):
        assert check_certainty_range(fact_base=_fb(), lower=-2.0, upper=1.0) == []

    def test_loaded_values_unchanged(self):
        kb = _kb()
        check_certainty_range(knowledge_base=kb)
        assert kb.rules[1].rule_certainty_factor == 1.5


class TestRunChecks:
    def test_disabled_by_default(self):
        assert run_checks(_kb(), _fb()) == []

    def test_enabled_checks_are_logged(self, caplog):
        with caplog.at_level("WARNING"):
            diagnostics = run_checks(_kb(), _fb(), unique_ids=True, certainty_range=True)
        assert len(diagnostics) == 3
        assert "DuplicateRuleId" in caplog.text
