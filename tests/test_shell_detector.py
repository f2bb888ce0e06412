"""Tests for bash detection (infra/shell_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from cmdline_utils.exceptions import CommandExecutionError
from cmdline_utils.infra.shell_detector import (
    ShellStatus,
    _platform_install_commands,
    detect_shell,
    require_shell,
)


class TestDetectShell:
    @patch("cmdline_utils.infra.shell_detector.shutil.which")
    def test_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/bin/bash"
        status = detect_shell()

        assert status.found is True
        assert isinstance(status.path, Path)
        assert status.version_hint.startswith("found at")
        assert status.install_commands == ()
        mock_which.assert_called_once_with("bash")

    @patch("cmdline_utils.infra.shell_detector.shutil.which")
    def test_not_found(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        status = detect_shell()

        assert status.found is False
        assert status.path is None
        assert status.version_hint == "not found"
        assert len(status.install_commands) > 0


class TestRequireShell:
    @patch("cmdline_utils.infra.shell_detector.shutil.which")
    def test_found_returns_path(self, mock_which: MagicMock) -> None:
        mock_which.return_value = "/bin/bash"
        assert isinstance(require_shell(), Path)

    @patch("cmdline_utils.infra.shell_detector.shutil.which")
    def test_missing_raises_with_hints(self, mock_which: MagicMock) -> None:
        mock_which.return_value = None
        with pytest.raises(CommandExecutionError, match="not installed") as exc_info:
            require_shell()
        hints = exc_info.value.hints
        assert hints is not None
        assert hints[0] == "Install bash using one of:"


class TestPlatformInstallCommands:
    @patch("cmdline_utils.infra.shell_detector.platform.system", return_value="Linux")
    def test_linux_commands(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert any("apt" in c for c in cmds)
        assert any("dnf" in c for c in cmds)

    @patch("cmdline_utils.infra.shell_detector.platform.system", return_value="Darwin")
    def test_darwin_commands(self, _mock_sys: MagicMock) -> None:
        assert _platform_install_commands() == ("brew install bash",)

    @patch("cmdline_utils.infra.shell_detector.platform.system", return_value="Plan9")
    def test_unknown_platform_falls_back(self, _mock_sys: MagicMock) -> None:
        cmds = _platform_install_commands()
        assert len(cmds) == 1
        assert "gnu.org" in cmds[0]


class TestShellStatus:
    def test_frozen(self) -> None:
        status = ShellStatus(
            found=True,
            path=Path("/bin/bash"),
            version_hint="found",
            install_commands=(),
        )
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
