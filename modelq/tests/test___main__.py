import runpy
from unittest.mock import patch

import pytest


class TestModuleEntryPoint:
    @patch("modelq.codegen.main.main", return_value=0)
    def test_exits_with_main_status(self, mock_main):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("modelq", run_name="__main__")

        assert exc_info.value.code == 0
        mock_main.assert_called_once_with()

    @patch("modelq.codegen.main.main", return_value=1)
    def test_propagates_failure_status(self, mock_main):
        with pytest.raises(SystemExit) as exc_info:
            runpy.run_module("modelq", run_name="__main__")

        assert exc_info.value.code == 1
