"""Tests for HTML reports."""

from jayson.report import html_page
from jayson.report.base import ReportOptions

NO_DATE = ReportOptions(timestamp=False)


class TestHtmlReport:
    def test_valid_page(self, valid_result):
        page = html_page.format_report(valid_result, NO_DATE)

        assert page.startswith("<!DOCTYPE html>")
        assert page.endswith("</html>")
        assert "<title>Validation Report</title>" in page
        assert ">VALID</span>" in page
        assert "No validation errors found." in page
        assert "Error #" not in page

    def test_invalid_page_escapes_values(self, invalid_result):
        page = html_page.format_report(invalid_result, NO_DATE)

        assert ">INVALID</span>" in page
        assert "Found 3 validation errors." in page
        assert "Error #3" in page
        assert "&lt;b&gt;hi&lt;/b&gt;" in page
        assert "<b>hi</b>" not in page

    def test_title_is_escaped(self, valid_result):
        options = ReportOptions(title="Report <x>", timestamp=False)

        page = html_page.format_report(valid_result, options)

        assert "<title>Report &lt;x&gt;</title>" in page

    def test_metadata_block(self, valid_result):
        options = ReportOptions(file_path="a&b.json")

        page = html_page.format_report(valid_result, options)

        assert "<strong>Date:</strong>" in page
        assert "a&amp;b.json" in page


class TestHtmlSummary:
    def test_summary_page(self, results):
        page = html_page.format_summary(results, NO_DATE)

        assert "<title>Validation Summary</title>" in page
        assert ">PASS</span>" in page
        assert ">FAIL</span>" in page
        assert "Detailed Errors" in page
        assert "Generated:" not in page
