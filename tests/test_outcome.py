"""Tests for outcomes, the severity policy and operation reports."""

import pytest

from champ_workspace.outcome import POLICY, OperationReport, Outcome, Severity


class TestPolicy:
    @pytest.mark.parametrize("condition", [
        "not-a-workspace",
        "vendor-dir-missing",
        "submodule-target-initialized",
        "tool-missing",
        "unknown-command",
        "clone-failed",
        "invalid-config",
    ])
    def test_fatal_conditions(self, condition):
        assert POLICY[condition] is Severity.FATAL

    @pytest.mark.parametrize("condition", [
        "optional-dir-missing",
        "patch-conflict",
        "remote-missing",
        "nothing-to-commit",
        "branch-switch-failed",
        "merge-failed",
        "rebase-failed",
        "not-a-submodule",
        "lfs-command-failed",
    ])
    def test_warning_conditions(self, condition):
        assert POLICY[condition] is Severity.WARNING

    def test_unknown_condition(self):
        with pytest.raises(KeyError):
            Outcome.from_condition("no-such-condition", "x")


class TestOperationReport:
    def test_empty_report_succeeds(self):
        report = OperationReport(command="check")
        assert report.exit_code == 0
        assert not report.failed

    def test_warnings_do_not_fail(self):
        report = OperationReport(command="vendor-init")
        report.flag("optional-dir-missing", "src/champ not found")
        report.flag("nothing-to-commit", "Nothing to commit")
        assert report.exit_code == 0
        assert len(report.warnings) == 2

    def test_fatal_fails(self):
        report = OperationReport(command="vendor-update")
        report.ok("starting")
        report.flag("vendor-dir-missing", "src/champ not found")
        assert report.failed
        assert report.exit_code == 1

    def test_echo_receives_outcomes_and_details_in_order(self):
        seen = []
        report = OperationReport(command="check", echo=seen.append)
        report.ok("scanning")
        report.detail("src/champ/.git")
        report.flag("nested-metadata-found", "found")
        assert seen[0] == Outcome.success("scanning")
        assert seen[1] == "src/champ/.git"
        assert seen[2].severity is Severity.WARNING
        assert seen[2].condition == "nested-metadata-found"
        assert report.details == ["src/champ/.git"]
