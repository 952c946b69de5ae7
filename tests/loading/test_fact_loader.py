import pytest
from io import StringIO

from classes.FactBase import FactBase
from loading.errors import ErrorKind, LoadError
from loading.fact_loader import load_facts, parse_fact_line


SAMPLE_FACTS = (
    "5\n"
    "h2,FC=0.3\n"
    "h4,FC=0.6\n"
    "h5,FC=0.6\n"
    "h6,FC=0.9\n"
    "h7,FC=0.5\n"
    "Objetivo\n"
    "h1\n"
)


def _load(text, **kwargs):
    return load_facts(StringIO(text), **kwargs)


def _load_error(text, **kwargs):
    with pytest.raises(LoadError) as excinfo:
        _load(text, **kwargs)
    return excinfo.value


# ── Sample fact base ─────────────────────────────────────────────────

class TestSampleFacts:
    def test_initial_facts(self):
        fb = _load(SAMPLE_FACTS)
        pairs = [(fact.name, fact.certainty_factor) for fact in fb.initial_facts]
        assert pairs == [("h2", 0.3), ("h4", 0.6), ("h5", 0.6), ("h6", 0.9), ("h7", 0.5)]

    def test_working_memory_seeded(self):
        fb = _load(SAMPLE_FACTS)
        assert fb.working_memory["h4"] == 0.6
        assert len(fb.working_memory) == 5

    def test_goal(self):
        fb = _load(SAMPLE_FACTS)
        assert fb.goal.name == "h1"
        assert fb.goal.certainty_factor is None

    def test_spaced_marker_and_blank_lines(self):
        text = "2\n\nh2, FC = 0.3\n\nh4 , fc= -1\n\n\nOBJETIVO\n\n  Diagnóstico Final  \n"
        fb = _load(text)
        assert [(f.name, f.certainty_factor) for f in fb.initial_facts] == [("h2", 0.3), ("h4", -1.0)]
        assert fb.goal.name == "Diagnóstico Final"

    def test_loads_from_path(self, tmp_path):
        path = tmp_path / "Prueba-1.hechos"
        path.write_text(SAMPLE_FACTS, encoding="utf-8")
        assert load_facts(path).goal.name == "h1"

    def test_repeated_name_last_write_wins(self):
        fb = _load("2\nh1, FC = 0.2\nh1, FC = -0.4\nObjetivo\nh9\n")
        assert len(fb.initial_facts) == 2
        assert fb.working_memory["h1"] == -0.4

    def test_lines_after_goal_ignored(self):
        fb = _load(SAMPLE_FACTS + "h8\nanything else\n")
        assert fb.goal.name == "h1"


# ── Line grammar ─────────────────────────────────────────────────────

class TestFactLine:
    def test_name_with_commas(self):
        fact = parse_fact_line("dolor, fiebre, tos, FC = 0.7")
        assert fact.name == "dolor, fiebre, tos"
        assert fact.certainty_factor == 0.7

    def test_out_of_range_passed_through(self):
        assert parse_fact_line("h1, FC = -7.5").certainty_factor == -7.5

    def test_marker_must_follow_comma(self):
        """Unlike rule lines, nothing may sit between the last comma and FC=."""
        with pytest.raises(LoadError) as excinfo:
            parse_fact_line("h1, valor FC = 0.5")
        assert excinfo.value.kind is ErrorKind.MISSING_KEYWORD


# ── Errors ───────────────────────────────────────────────────────────

class TestFactErrors:
    def test_invalid_count(self):
        assert _load_error("x\nh1, FC = 1\nObjetivo\nh2\n").kind is ErrorKind.INVALID_COUNT

    def test_missing_comma_adds_nothing(self):
        fb = FactBase()
        error = _load_error("3\nh2, FC = 0.3\nh4 FC = 0.6\nh5, FC = 0.6\nObjetivo\nh1\n", fact_base=fb)
        assert error.kind is ErrorKind.MISSING_DELIMITER
        assert error.line_number == 3
        assert [fact.name for fact in fb.initial_facts] == ["h2"]
        assert "h4 FC = 0.6" not in fb.working_memory
        assert "h4" not in fb.working_memory

    def test_invalid_number_adds_nothing(self):
        fb = FactBase()
        error = _load_error("1\nh2, FC = mucho\nObjetivo\nh1\n", fact_base=fb)
        assert error.kind is ErrorKind.INVALID_NUMBER
        assert fb.initial_facts == []
        assert len(fb.working_memory) == 0

    def test_empty_name(self):
        assert _load_error("1\n, FC = 0.3\nObjetivo\nh1\n").kind is ErrorKind.EMPTY_CLAUSE

    def test_too_few_facts(self):
        assert _load_error("3\nh2, FC = 0.3\nh4, FC = 0.6\n").kind is ErrorKind.UNEXPECTED_EOF

    def test_missing_objetivo_keyword(self):
        assert _load_error("1\nh2, FC = 0.3\n\n\n").kind is ErrorKind.UNEXPECTED_EOF

    def test_wrong_keyword(self):
        error = _load_error("1\nh2, FC = 0.3\nMeta\nh1\n")
        assert error.kind is ErrorKind.MISSING_KEYWORD
        assert error.line_number == 3

    def test_keyword_must_be_alone(self):
        assert _load_error("1\nh2, FC = 0.3\nObjetivo: h1\n").kind is ErrorKind.MISSING_KEYWORD

    def test_missing_goal(self):
        assert _load_error("1\nh2, FC = 0.3\nObjetivo\n   \n").kind is ErrorKind.EMPTY_CLAUSE


# ── Count handling ───────────────────────────────────────────────────

class TestFactCount:
    def test_surplus_facts_not_loaded(self):
        diagnostics = []
        fb = _load("2\nh2, FC = 0.3\nh4, FC = 0.6\nh5, FC = 0.6\nObjetivo\nh1\n", diagnostics=diagnostics)
        assert [fact.name for fact in fb.initial_facts] == ["h2", "h4"]
        assert "h5" not in fb.working_memory
        assert fb.goal.name == "h1"
        assert [d.kind for d in diagnostics] == [ErrorKind.COUNT_MISMATCH]
        assert diagnostics[0].line_number == 4

    def test_exact_count_has_no_diagnostic(self):
        diagnostics = []
        _load(SAMPLE_FACTS, diagnostics=diagnostics)
        assert diagnostics == []


# ── Encoding ─────────────────────────────────────────────────────────

class TestFactEncoding:
    def test_latin1_file_is_a_load_error(self, tmp_path):
        path = tmp_path / "latin1.hechos"
        path.write_bytes("1\nDiagnóstico, FC = 0.3\nObjetivo\nh1\n".encode("latin-1"))
        fb = FactBase()
        with pytest.raises(LoadError) as excinfo:
            load_facts(path, fact_base=fb)
        assert excinfo.value.kind is ErrorKind.INVALID_ENCODING
        assert excinfo.value.line_number == 2
        assert excinfo.value.source_name == str(path)
        assert fb.initial_facts == []

    def test_utf8_byte_order_mark_skipped(self, tmp_path):
        path = tmp_path / "bom.hechos"
        path.write_bytes("1\nDiagnóstico, FC = 0.3\nObjetivo\nh1\n".encode("utf-8-sig"))
        fb = load_facts(path)
        assert fb.working_memory["Diagnóstico"] == 0.3
