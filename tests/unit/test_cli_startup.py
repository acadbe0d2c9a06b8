# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import unittest
from pathlib import Path
from unittest import mock

from uniconvert.cli import startup


class TestRunStartup(unittest.TestCase):
    @mock.patch("uniconvert.cli.startup.init_user_config")
    @mock.patch("uniconvert.cli.startup.configure_ui")
    def test_plain_startup_continues(
        self,
        configure_ui: mock.MagicMock,
        init_user_config: mock.MagicMock,
    ) -> None:
        should_exit = startup.run_startup(
            quiet=False, no_color=True, no_animations=True, debug=False, init_config=False
        )
        self.assertFalse(should_exit)
        configure_ui.assert_called_once_with(no_color=True, no_animations=True)
        init_user_config.assert_not_called()

    @mock.patch("uniconvert.cli.startup.console.print")
    @mock.patch("uniconvert.cli.startup.init_user_config", return_value=Path("/cfg/uniconvert"))
    def test_init_config_reports_and_exits(
        self,
        init_user_config: mock.MagicMock,
        print_mock: mock.MagicMock,
    ) -> None:
        should_exit = startup.run_startup(
            quiet=False, no_color=False, no_animations=False, debug=False, init_config=True
        )
        self.assertTrue(should_exit)
        init_user_config.assert_called_once_with()
        self.assertIn("/cfg/uniconvert", print_mock.call_args.args[0])

    @mock.patch("uniconvert.cli.startup.install_rich_traceback")
    def test_debug_installs_rich_traceback(self, install: mock.MagicMock) -> None:
        startup.run_startup(
            quiet=True, no_color=False, no_animations=False, debug=True, init_config=False
        )
        install.assert_called_once_with(show_locals=True)


if __name__ == "__main__":
    unittest.main()
