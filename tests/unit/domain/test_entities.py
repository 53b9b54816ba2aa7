"""Unit tests for text ranges, edits and edit sets."""

import unittest

from react_memo_linter.domain.entities import (
    Edit,
    EditSet,
    FileReport,
    LintMessage,
    RunSummary,
    TextRange,
)
from react_memo_linter.domain.exceptions import OverlappingEditsError, ReactMemoLinterError


def _message(severity: str = "error", fix: Edit | None = None) -> LintMessage:
    return LintMessage(
        rule_id="require-usememo",
        message_id="useMemo",
        message="Wrap this value with useMemo inside custom hooks and components.",
        severity=severity,
        line=2,
        column=4,
        end_line=2,
        end_column=9,
        fix=fix,
    )


class TestTextRange(unittest.TestCase):
    def test_invalid_ranges_raise(self) -> None:
        with self.assertRaises(ValueError):
            TextRange(5, 2)
        with self.assertRaises(ValueError):
            TextRange(-1, 0)

    def test_overlaps(self) -> None:
        self.assertTrue(TextRange(0, 5).overlaps(TextRange(4, 6)))
        self.assertFalse(TextRange(0, 5).overlaps(TextRange(5, 6)))
        self.assertFalse(TextRange(0, 0).overlaps(TextRange(0, 3)))
        self.assertTrue(TextRange(3, 3).overlaps(TextRange(3, 3)))
        self.assertTrue(TextRange(1, 4).contains(TextRange(2, 3)))


class TestEditSet(unittest.TestCase):
    def test_edits_are_sorted(self) -> None:
        edit_set = EditSet.of(Edit(TextRange(8, 9), "b"), Edit(TextRange(0, 0), "a"))
        self.assertEqual([e.range.start for e in edit_set.edits], [0, 8])
        self.assertEqual(edit_set.span, TextRange(0, 9))

    def test_overlapping_edits_raise(self) -> None:
        with self.assertRaises(OverlappingEditsError):
            EditSet.of(Edit(TextRange(0, 4), "x"), Edit(TextRange(2, 6), "y"))
        with self.assertRaises(ValueError):
            EditSet.of(Edit(TextRange(2, 2), "x"), Edit(TextRange(2, 2), "y"))
        with self.assertRaises(ReactMemoLinterError):
            EditSet.of(Edit(TextRange(0, 4), "x"), Edit(TextRange(0, 4), "y"))

    def test_merged_copies_text_between_edits(self) -> None:
        source = "const a = f();"
        edit_set = EditSet.of(Edit(TextRange(0, 0), "// hi\n"), Edit(TextRange(10, 13), "g()"))
        merged = edit_set.merged(source)
        self.assertEqual(merged.range, TextRange(0, 13))
        self.assertEqual(merged.text, "// hi\nconst a = g()")
        self.assertEqual(edit_set.apply(source), "// hi\nconst a = g();")

    def test_empty_edit_set(self) -> None:
        self.assertEqual(EditSet.of().apply("abc"), "abc")


class TestReports(unittest.TestCase):
    def test_message_dict_uses_camel_case(self) -> None:
        data = _message(fix=Edit(TextRange(0, 1), "x")).to_dict()
        self.assertEqual(data["ruleId"], "require-usememo")
        self.assertEqual(data["endColumn"], 9)
        self.assertTrue(data["fixable"])
        self.assertEqual(_message().location("a.tsx"), "a.tsx:2:4")

    def test_counts(self) -> None:
        report = FileReport(path="a.js", messages=(_message(), _message("warn"), _message()))
        self.assertEqual(report.error_count, 2)
        self.assertEqual(report.warning_count, 1)
        summary = RunSummary(reports=(report, FileReport(path="b.js", fixed=True)))
        self.assertEqual(summary.error_count, 2)
        self.assertEqual(summary.fixed_files, 1)
