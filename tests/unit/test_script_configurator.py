"""
Unit tests for the script and null configurators.
"""
import logging
import pytest
import sys
from pathlib import Path

from axroot.configurators import NullConfigurator, ScriptConfigurator
from axroot.errors import DelegationError

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="shell scripts require POSIX")


def _write_script(path: Path, body: str, executable: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body)
    if executable:
        path.chmod(0o755)
    return path


class TestScriptConfigurator:
    """Test delegation to an external script."""

    def test_passes_root_path_as_only_argument(self, tmp_path):
        record = tmp_path / "args.txt"
        script = _write_script(
            tmp_path / "scripts" / "set_ax_root.sh",
            f'echo "$#:$1" > "{record}"\n'
        )

        ScriptConfigurator(script).configure(Path(".arceos"))

        assert record.read_text().strip() == "1:.arceos"

    def test_relative_script_resolved_from_cwd(self, tmp_path):
        record = tmp_path / "ran.txt"
        _write_script(tmp_path / "scripts" / "set_ax_root.sh", f'touch "{record}"\n')

        ScriptConfigurator(Path("scripts/set_ax_root.sh"), cwd=tmp_path).configure(tmp_path / ".arceos")

        assert record.exists()

    def test_nonzero_exit_raises_delegation_error(self, tmp_path):
        script = _write_script(tmp_path / "set_ax_root.sh", "exit 4\n")

        with pytest.raises(DelegationError) as exc_info:
            ScriptConfigurator(script).configure(tmp_path / ".arceos")

        assert exc_info.value.returncode == 4
        assert exc_info.value.exit_code == 4

    def test_missing_script(self, tmp_path):
        with pytest.raises(DelegationError) as exc_info:
            ScriptConfigurator(tmp_path / "nope.sh").configure(tmp_path / ".arceos")

        assert "not found" in str(exc_info.value)
        assert exc_info.value.exit_code == 1

    def test_non_executable_script(self, tmp_path):
        script = _write_script(tmp_path / "set_ax_root.sh", "exit 0\n", executable=False)

        with pytest.raises(DelegationError) as exc_info:
            ScriptConfigurator(script).configure(tmp_path / ".arceos")

        assert "Failed to run" in str(exc_info.value)


class TestNullConfigurator:
    """Test disabled configuration."""

    def test_logs_and_returns(self, tmp_path, caplog):
        with caplog.at_level(logging.INFO, logger="axroot.configurators.base"):
            NullConfigurator().configure(tmp_path / ".arceos")

        assert "disabled" in caplog.text
