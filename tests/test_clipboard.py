import subprocess
from unittest import TestCase
from unittest.mock import patch

from admin_panel.core import clipboard


class ClipboardTests(TestCase):
    def test_platform_command_receives_text(self):
        completed = subprocess.CompletedProcess(["pbcopy"], 0, stdout="", stderr="")
        with patch.object(clipboard, "_clipboard_command", return_value=["pbcopy"]), \
                patch.object(clipboard.subprocess, "run", return_value=completed) as run:
            self.assertTrue(clipboard.copy_to_clipboard("s3cret"))
        self.assertEqual(run.call_args.kwargs["input"], "s3cret")

    def test_failing_command_returns_false(self):
        completed = subprocess.CompletedProcess(["xclip"], 1, stdout="", stderr="no display")
        with patch.object(clipboard, "_clipboard_command", return_value=["xclip"]), \
                patch.object(clipboard.subprocess, "run", return_value=completed):
            self.assertFalse(clipboard.copy_to_clipboard("s3cret"))

    def test_timeout_returns_false(self):
        with patch.object(clipboard, "_clipboard_command", return_value=["wl-copy"]), \
                patch.object(clipboard.subprocess, "run", side_effect=subprocess.TimeoutExpired("wl-copy", 5)):
            self.assertFalse(clipboard.copy_to_clipboard("s3cret"))

    def test_falls_back_to_tk_without_command(self):
        with patch.object(clipboard, "_clipboard_command", return_value=None), \
                patch.object(clipboard, "_copy_with_tk", return_value=True) as tk_copy:
            self.assertTrue(clipboard.copy_to_clipboard("s3cret"))
        tk_copy.assert_called_once_with("s3cret")

    def test_tk_unavailable_returns_false(self):
        with patch.dict("sys.modules", {"tkinter": None}):
            self.assertFalse(clipboard._copy_with_tk("s3cret"))

    def test_no_command_on_headless_linux(self):
        with patch.object(clipboard.sys, "platform", "linux"), \
                patch.dict("os.environ", {}, clear=True):
            self.assertIsNone(clipboard._clipboard_command())

    def test_macos_uses_pbcopy(self):
        with patch.object(clipboard.sys, "platform", "darwin"), \
                patch.object(clipboard.shutil, "which", return_value="/usr/bin/pbcopy"):
            self.assertEqual(clipboard._clipboard_command(), ["pbcopy"])
