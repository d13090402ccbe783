"""Process exit codes for the `travelvibe` command."""
from unittest.mock import patch

from travelvibe.__main__ import main


def test_clean_shutdown_exits_zero():
    with patch("travelvibe.__main__.setup_logging"), \
         patch("travelvibe.__main__.uvicorn.run", return_value=None) as run:
        assert main() == 0
    run.assert_called_once()
    assert run.call_args.args[0] == "travelvibe.main:app"


def test_launch_failure_exits_non_zero():
    with patch("travelvibe.__main__.setup_logging"), \
         patch("travelvibe.__main__.uvicorn.run", side_effect=OSError("address already in use")):
        assert main() == 1
