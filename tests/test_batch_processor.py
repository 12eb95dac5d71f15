"""Unit tests for the sequential batch processor."""

from unittest.mock import MagicMock

import pytest

from nuker.cleanup.batch_processor import BatchProcessor
from nuker.models import BatchResult


class TestBatchResult:
    """Tests for BatchResult dataclass."""

    def test_batch_result_defaults(self):
        result = BatchResult()

        assert result.successful == []
        assert result.failed == []
        assert result.errors == {}


class TestBatchProcessor:
    """Tests for BatchProcessor class."""

    def test_default_limit_is_100(self):
        assert BatchProcessor().max_batch_size == 100

    def test_rejects_non_positive_limit(self):
        with pytest.raises(ValueError):
            BatchProcessor(max_batch_size=0)

    def test_exceeds_limit(self):
        processor = BatchProcessor(max_batch_size=2)

        assert processor.exceeds_limit(["a", "b"]) is False
        assert processor.exceeds_limit(["a", "b", "c"]) is True

    def test_oversized_batch_deletes_nothing(self):
        processor = BatchProcessor(max_batch_size=2)
        delete_func = MagicMock()

        with pytest.raises(ValueError):
            processor.process_deletions(["a", "b", "c"], delete_func)

        delete_func.assert_not_called()

    def test_empty_batch(self):
        processor = BatchProcessor()
        delete_func = MagicMock()

        result, exceptions = processor.process_deletions([], delete_func)

        assert result.successful == []
        assert exceptions == {}
        delete_func.assert_not_called()

    def test_processes_in_order(self):
        processor = BatchProcessor()
        calls = []

        result, exceptions = processor.process_deletions(["r-1", "r-2", "r-3"], calls.append)

        assert calls == ["r-1", "r-2", "r-3"]
        assert result.successful == ["r-1", "r-2", "r-3"]
        assert exceptions == {}

    def test_failure_does_not_abort_batch(self):
        processor = BatchProcessor()
        error = RuntimeError("API error")
        delete_func = MagicMock(side_effect=[None, error, None])

        result, exceptions = processor.process_deletions(["r-1", "r-2", "r-3"], delete_func)

        assert delete_func.call_count == 3
        assert result.successful == ["r-1", "r-3"]
        assert result.failed == ["r-2"]
        assert result.errors == {"r-2": "API error"}
        assert exceptions == {"r-2": error}

    def test_on_item_called_for_every_item(self):
        processor = BatchProcessor()
        error = RuntimeError("nope")
        delete_func = MagicMock(side_effect=[error, None])
        on_item = MagicMock()

        processor.process_deletions(["r-1", "r-2"], delete_func, on_item=on_item)

        assert on_item.call_count == 2
        on_item.assert_any_call("r-1", error)
        on_item.assert_any_call("r-2", None)
