"""Tests for danger_detekt/reporters"""

import pytest

from danger_detekt.reporters import Annotation, AnnotationCollector, GitHubReporter
from danger_detekt.reporters.github import escape_data, escape_property


# ---------------------------------------------------------------------------
# AnnotationCollector
# ---------------------------------------------------------------------------

def test_collector_keeps_calls_in_order():
    c = AnnotationCollector()
    c("first", "A.kt", 1)
    c("second", "B.kt", 0)
    assert c.annotations == [Annotation("first", "A.kt", 1), Annotation("second", "B.kt", 0)]
    assert len(c) == 2


def test_collector_by_file_counts():
    c = AnnotationCollector()
    c("m", "B.kt", 1)
    c("m", "A.kt", 2)
    c("m", "B.kt", 3)
    assert c.by_file() == {"B.kt": 2, "A.kt": 1}
    assert list(c.by_file()) == ["B.kt", "A.kt"]


def test_annotation_to_dict():
    assert Annotation("msg", "A.kt", 4).to_dict() == {"message": "msg", "file": "A.kt", "line": 4}


# ---------------------------------------------------------------------------
# Escaping
# ---------------------------------------------------------------------------

def test_escape_data():
    assert escape_data("100%\r\nnext") == "100%25%0D%0Anext"


def test_escape_data_keeps_colons_and_commas():
    assert escape_data("Detekt: a, rule: b") == "Detekt: a, rule: b"


def test_escape_property():
    assert escape_property("C:\\src,x.kt") == "C%3A\\src%2Cx.kt"


# ---------------------------------------------------------------------------
# GitHubReporter
# ---------------------------------------------------------------------------

class TestGitHubReporter:
    def test_emits_workflow_command(self):
        lines = []
        r = GitHubReporter(echo=lines.append)
        r("Detekt: Long line, rule: MaxLineLength", "src/Foo.kt", 12)
        assert lines == ["::warning file=src/Foo.kt,line=12::Detekt: Long line, rule: MaxLineLength"]

    def test_line_zero_omits_line_property(self):
        lines = []
        GitHubReporter(echo=lines.append)("msg", "src/Foo.kt", 0)
        assert lines == ["::warning file=src/Foo.kt::msg"]

    def test_custom_level(self):
        lines = []
        GitHubReporter(level="error", echo=lines.append)("msg", "A.kt", 1)
        assert lines[0].startswith("::error ")

    def test_multiline_message_is_escaped(self):
        lines = []
        GitHubReporter(echo=lines.append)("a\nb", "A.kt", 1)
        assert lines == ["::warning file=A.kt,line=1::a%0Ab"]

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError, match="Unknown annotation level"):
            GitHubReporter(level="fatal")

    def test_defaults_to_click_echo(self, capsys):
        GitHubReporter()("msg", "A.kt", 2)
        assert capsys.readouterr().out == "::warning file=A.kt,line=2::msg\n"
