"""
Tests for the batch result accumulator.
"""

from capstone_backend.core.batch import BatchResult


class TestBatchResult:
    def test_starts_empty(self):
        assert BatchResult().to_dict() == {
            "created": 0,
            "updated": 0,
            "assigned": 0,
            "errors": 0,
            "details": [],
        }

    def test_add_error_counts_and_keeps_context(self):
        result = BatchResult()
        result.add_error("No available panel found", project_id="p1")
        result.add_error("Not enough faculty. Need 3, found 1", department="CSE")

        assert result.errors == 2
        assert result.details == [
            {"project_id": "p1", "error": "No available panel found"},
            {"department": "CSE", "error": "Not enough faculty. Need 3, found 1"},
        ]

    def test_results_are_independent(self):
        first, second = BatchResult(), BatchResult()
        first.add_error("boom")
        assert second.details == []
