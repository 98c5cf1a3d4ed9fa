from map_branch import cli
from map_branch.errors import GitError, StepFailedError
from map_branch.recipe import Step
from map_branch.runner import RunReport, StepResult


def _report(*codes):
    step = Step(kind="stage", target="x")
    return RunReport(results=[StepResult(step=step, returncode=code) for code in codes])


def test_main_passes_flags_into_config(monkeypatch):
    seen = []

    def fake_run_recipe(config):
        seen.append(config)
        return _report()

    monkeypatch.setattr(cli, "run_recipe", fake_run_recipe)
    monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    assert cli.main(["-C", "/repo", "--dry-run", "--fail-fast", "-vv"]) == 0

    config = seen[0]
    assert config.repo == "/repo"
    assert config.dry_run is True
    assert config.fail_fast is True
    assert config.verbosity == 2


def test_main_defaults_match_plain_invocation():
    args = cli.build_arg_parser().parse_args([])

    assert args.repo is None
    assert args.dry_run is False
    assert args.fail_fast is False
    assert args.verbose == 0


def test_main_returns_last_step_exit_code(monkeypatch):
    monkeypatch.setattr(cli, "run_recipe", lambda config: _report(128, 0, 1))
    monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    assert cli.main([]) == 1


def test_main_returns_failed_step_code_in_fail_fast(monkeypatch):
    result = StepResult(step=Step(kind="branch", target="b"), returncode=128)

    def fake_run_recipe(config):
        raise StepFailedError(result)

    monkeypatch.setattr(cli, "run_recipe", fake_run_recipe)
    monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    assert cli.main(["--fail-fast"]) == 128


def test_main_reports_git_errors(monkeypatch, capsys):
    def fake_run_recipe(config):
        raise GitError("failed to execute git: not found")

    monkeypatch.setattr(cli, "run_recipe", fake_run_recipe)
    monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    assert cli.main([]) == 1
    assert "create-map-branch: error: failed to execute git" in capsys.readouterr().err


def test_main_handles_keyboard_interrupt(monkeypatch):
    def fake_run_recipe(config):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_recipe", fake_run_recipe)
    monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    assert cli.main([]) == 130
