import subprocess
import sys
from unittest import mock

import pytest

from rustrepl.dependencies import (
    check_required_deps,
    dep_installed,
    optional_dependencies,
    warn_about_opt_deps,
)
from rustrepl.options import Options


def test_dep_installed_missing_command():
    assert dep_installed("definitely-not-a-real-command-xyz") is False


def test_dep_installed_existing_command():
    assert dep_installed(sys.executable) is True


def test_check_required_deps_missing(capsys):
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError):
        assert check_required_deps() is False
    err = capsys.readouterr().err
    assert "cargo is not insalled!" in err


def test_check_required_deps_present():
    done = subprocess.CompletedProcess(["cargo", "-h"], 0)
    with mock.patch.object(subprocess, "run", return_value=done):
        assert check_required_deps() is True


def test_optional_dependencies_order():
    deps = optional_dependencies()
    assert [dep.name for dep in deps] == ["racer", "rustfmt", "cargo-edit", "cargo-asm"]
    assert [dep.cmd for dep in deps] == ["racer", "rustfmt", "cargo-add", "cargo-asm"]


def test_install_cargo_edit_runs_cargo(capsys):
    dep = next(d for d in optional_dependencies() if d.name == "cargo-edit")
    done = subprocess.CompletedProcess([], 0)
    with mock.patch.object(subprocess, "run", return_value=done) as run:
        assert dep.install() == [0]
    run.assert_called_once_with(["cargo", "install", "cargo-edit"])
    assert 'Running: ["cargo", "install", "cargo-edit"]' in capsys.readouterr().out


def test_install_racer_needs_rustup():
    dep = next(d for d in optional_dependencies() if d.name == "racer")
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError):
        with pytest.raises(OSError):
            dep.install()


def test_warn_skipped_after_first_run():
    options = Options(first_irust_run=False)
    calls = []
    result = warn_about_opt_deps(options, lambda: calls.append(1) or "n")
    assert result is False
    assert calls == []


def test_warn_declined_installs_nothing():
    options = Options()
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError) as run:
        result = warn_about_opt_deps(options, lambda: "n")
    assert result is False
    assert options.first_irust_run is False
    # only the presence checks ran, one per optional dependency
    assert run.call_count == len(optional_dependencies())


def test_warn_failed_install_reports_error(capsys):
    options = Options()
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError):
        result = warn_about_opt_deps(options, lambda: "y")
    assert result is False
    assert "error while installing racer" in capsys.readouterr().out
    assert options.first_irust_run is False