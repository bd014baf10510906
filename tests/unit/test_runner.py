#
# tests/unit/test_runner.py
#
"""Unit tests for Runner orchestration."""

import io
from unittest.mock import MagicMock, call

import pytest
from rich.console import Console

from minitest_guard.execution import BundlerCleanEnvironment, StaticVersionProbe
from minitest_guard.runner import NOTIFICATION_TITLE, BackendKind, Runner, legacy_shim_path
from minitest_guard.ui import ConsoleNotifier

ALL_TEST_FILES = ["test/a_test.rb", "test/b_test.rb"]


class TestConstruction:
    """Options, accessors and deprecation reporting."""

    def test_accessors_reflect_options(self, make_runner):
        runner = make_runner(
            include=["lib"],
            test_folders=["test", "test"],
            cli="--pride",
            all_after_pass=True,
            zeus="unit",
        )

        assert runner.include_folders == ["lib"]
        assert runner.test_folders == ["test"]
        assert runner.cli_options == ["--pride"]
        assert runner.all_after_pass is True
        assert runner.zeus is True
        assert runner.drb is False
        assert runner.spring is False
        assert runner.backend.kind is BackendKind.ZEUS

    def test_spring_disables_bundler(self, make_runner):
        runner = make_runner(bundler=True, spring=True, rubygems=True)
        assert runner.bundler is False
        assert runner.rubygems is True

    def test_deprecations_are_reported_through_ui(self, make_runner, mock_ui: MagicMock):
        runner = make_runner(seed=42, verbose=True)

        assert runner.cli_options == ["--seed 42", "--verbose"]
        assert "seed" not in runner.options.extra
        messages = [c.args[0] for c in mock_ui.info.call_args_list]
        assert len(messages) == 2
        assert all(m.startswith("DEPRECATION WARNING") for m in messages)

    def test_plain_construction_does_not_report(self, mock_ui: MagicMock, mock_inspector):
        Runner(ui=mock_ui, inspector=mock_inspector)
        mock_ui.info.assert_not_called()


class TestRun:
    """The run entry point."""

    def test_runs_synthesized_command(self, make_runner, mock_executor: MagicMock, mock_ui: MagicMock):
        runner = make_runner(test_folders=["test"])

        assert runner.run(["test/a_test.rb"]) is True

        mock_ui.info.assert_called_once_with("Running: test/a_test.rb", reset=True)
        mock_executor.execute.assert_called_once_with(
            ["ruby", '-I"test"', "-r minitest/autorun", "-r ./test/a_test.rb", '-e ""', "--"]
        )

    def test_full_run_message(self, make_runner, mock_ui: MagicMock):
        make_runner().run(ALL_TEST_FILES, all_tests=True)
        mock_ui.info.assert_called_once_with("Running: all tests", reset=True)

    def test_failure_is_returned_as_false(self, make_runner, mock_executor: MagicMock):
        mock_executor.execute.return_value = False
        assert make_runner().run(["test/a_test.rb"]) is False

    def test_isolation_wraps_execution_without_bundler(self, make_runner, mock_executor: MagicMock):
        isolation = MagicMock(side_effect=lambda run: run())
        runner = make_runner(isolation=isolation)

        assert runner.run(["test/a_test.rb"]) is True
        isolation.assert_called_once()
        mock_executor.execute.assert_called_once()

    def test_bundler_skips_isolation(self, make_runner, mock_executor: MagicMock):
        isolation = MagicMock(spec=BundlerCleanEnvironment)
        runner = make_runner(isolation=isolation, bundler=True)

        runner.run(["test/a_test.rb"])

        isolation.assert_not_called()
        assert mock_executor.execute.call_args.args[0][:3] == ["bundle", "exec", "ruby"]

    @pytest.mark.parametrize("flags", [{"zeus": True}, {"spring": "testunit"}])
    @pytest.mark.parametrize(("status", "image"), [(True, "success"), (False, "failed")])
    def test_out_of_process_backends_notify(
        self, make_runner, mock_executor, mock_notifier, flags, status, image
    ):
        mock_executor.execute.return_value = status
        make_runner(**flags).run(["test/a_test.rb"])

        mock_notifier.notify.assert_called_once_with(
            "Running: test/a_test.rb", title=NOTIFICATION_TITLE, image=image
        )

    @pytest.mark.parametrize("flags", [{}, {"drb": True}])
    def test_in_process_backends_do_not_notify(self, make_runner, mock_notifier, flags):
        make_runner(**flags).run(["test/a_test.rb"])
        mock_notifier.notify.assert_not_called()


class TestAllAfterPass:
    """Re-running the whole suite after a passing partial run."""

    def test_passing_partial_run_triggers_one_full_run(self, make_runner, mock_executor, mock_inspector, mock_ui):
        runner = make_runner(all_after_pass=True)

        assert runner.run(["test/a_test.rb"]) is True

        assert mock_executor.execute.call_count == 2
        mock_inspector.clean_all.assert_called_once()
        assert mock_ui.info.call_args_list == [
            call("Running: test/a_test.rb", reset=True),
            call("Running: all tests", reset=True),
        ]

    def test_full_run_result_is_returned(self, make_runner, mock_executor):
        mock_executor.execute.side_effect = [True, False]
        assert make_runner(all_after_pass=True).run(["test/a_test.rb"]) is False

    def test_failed_run_does_not_rerun(self, make_runner, mock_executor):
        mock_executor.execute.return_value = False
        assert make_runner(all_after_pass=True).run(["test/a_test.rb"]) is False
        assert mock_executor.execute.call_count == 1

    def test_full_run_does_not_rerun(self, make_runner, mock_executor):
        make_runner(all_after_pass=True).run(ALL_TEST_FILES, all_tests=True)
        assert mock_executor.execute.call_count == 1

    def test_disabled_by_default(self, make_runner, mock_executor):
        make_runner().run(["test/a_test.rb"])
        assert mock_executor.execute.call_count == 1


class TestEvents:
    """run_all and the file event entry points."""

    def test_run_all_runs_clean_all_as_full_run(self, make_runner, mock_executor, mock_ui):
        make_runner(test_folders=["test"]).run_all()

        mock_ui.info.assert_called_once_with("Running: all tests", reset=True)
        command = mock_executor.execute.call_args.args[0]
        assert "-r ./test/a_test.rb" in command
        assert "-r ./test/b_test.rb" in command

    def test_modifications_are_cleaned_first(self, make_runner, mock_inspector, mock_ui):
        mock_inspector.clean.side_effect = None
        mock_inspector.clean.return_value = ["test/a_test.rb"]

        make_runner().run_on_modifications(["lib/a.rb", "test/a_test.rb"])

        mock_inspector.clean.assert_called_once_with(["lib/a.rb", "test/a_test.rb"])
        mock_ui.info.assert_called_once_with("Running: test/a_test.rb", reset=True)

    def test_modifications_covering_every_file_count_as_full_run(self, make_runner, mock_executor, mock_ui):
        runner = make_runner(all_after_pass=True)

        runner.run_on_modifications(list(ALL_TEST_FILES))

        mock_ui.info.assert_called_once_with("Running: all tests", reset=True)
        assert mock_executor.execute.call_count == 1

    def test_additions_clear_memo_and_succeed(self, make_runner, mock_inspector, mock_executor):
        runner = make_runner()

        assert runner.run_on_additions([]) is True
        assert runner.run_on_additions(["test/new_test.rb"]) is True
        assert mock_inspector.clear_memoized_test_files.call_count == 2
        mock_executor.execute.assert_not_called()

    def test_removals_return_clear_result(self, make_runner, mock_inspector, mock_executor):
        mock_inspector.clear_memoized_test_files.return_value = "cleared"

        assert make_runner().run_on_removals(["test/old_test.rb"]) == "cleared"
        mock_executor.execute.assert_not_called()


class TestLegacyShim:
    """The version probe only matters for plain ruby and spring testunit."""

    def test_plain_on_old_minitest_requires_shim(self, make_runner, mock_executor):
        make_runner(gte_5=False).run(["test/a_test.rb"])
        assert f"-r {legacy_shim_path()}" in mock_executor.execute.call_args.args[0]

    def test_spring_on_old_minitest_gets_shim(self, make_runner, mock_executor):
        make_runner(gte_5=False, spring=True).run(["test/a_test.rb"])
        assert mock_executor.execute.call_args.args[0] == [
            "spring",
            "testunit",
            legacy_shim_path(),
            "TEST=test/a_test.rb",
        ]

    @pytest.mark.parametrize("flags", [{"drb": True}, {"zeus": True}, {"spring": "rake test"}])
    def test_probe_not_consulted_for_other_launchers(self, mock_inspector, mock_executor, flags):
        probe = MagicMock(spec=StaticVersionProbe)
        runner = Runner.from_mapping(
            {"bundler": False, **flags},
            inspector=mock_inspector,
            ui=MagicMock(),
            notifier=MagicMock(),
            executor=mock_executor,
            version_probe=probe,
        )

        runner.run(["test/a_test.rb"])

        probe.minitest_version_gte_5.assert_not_called()


class TestNotificationOutput:
    """Notifications with the real console notifier."""

    @pytest.mark.parametrize("flags", [{"zeus": True}, {"spring": True}])
    def test_bracketed_path_keeps_result(self, mock_inspector, mock_ui, mock_executor, flags):
        console = Console(file=io.StringIO(), width=120, color_system=None)
        runner = Runner.from_mapping(
            {"bundler": False, **flags},
            inspector=mock_inspector,
            ui=mock_ui,
            notifier=ConsoleNotifier(console),
            executor=mock_executor,
            isolation=MagicMock(side_effect=lambda run: run()),
            version_probe=StaticVersionProbe(True),
        )

        assert runner.run(["test/[/legacy]_test.rb"]) is True
        assert "Running: test/[/legacy]_test.rb" in console.file.getvalue()
