"""Helper and logging utility tests"""

import logging

import pytest

from crossVal.utils.helpers import ensure_directory, format_time, import_class, import_dotted
from crossVal.utils.logger import get_logger, setup_logging


class TestHelpers:
    """utils.helpers"""

    @pytest.mark.parametrize("seconds, expected", [(1.5, "1.50s"), (90, "1.50m"), (5400, "1.50h")])
    def test_format_time(self, seconds, expected):
        assert format_time(seconds) == expected

    def test_import_class(self):
        from sklearn.model_selection import LeaveOneOut

        assert import_class("sklearn.model_selection", "LeaveOneOut") is LeaveOneOut

    def test_import_dotted(self):
        from sklearn.dummy import DummyRegressor

        assert import_dotted("sklearn.dummy.DummyRegressor") is DummyRegressor

    def test_import_dotted_needs_module(self):
        with pytest.raises(ImportError):
            import_dotted("DummyRegressor")

    def test_ensure_directory(self, tmp_path):
        path = ensure_directory(tmp_path / "a" / "b")
        assert path.is_dir()


class TestLogger:
    """utils.logger"""

    def test_get_logger_adds_one_handler(self):
        logger = get_logger("crossVal.tests.once")
        get_logger("crossVal.tests.once")
        assert len(logger.handlers) == 1

    def test_setup_logging_accepts_level_names(self, tmp_path):
        root = logging.getLogger()
        before = list(root.handlers)
        try:
            setup_logging("debug", log_file=tmp_path / "run.log")
            assert root.level == logging.DEBUG
            assert (tmp_path / "run.log").exists()
        finally:
            for handler in root.handlers[len(before):]:
                handler.close()
            root.handlers = before
            root.setLevel(logging.WARNING)
