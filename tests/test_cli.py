"""
Test the demo CLI.
"""

from click.testing import CliRunner

from envrecord import __version__
from envrecord.cli import cli


PREFIX = "ENVRECORD_CLI_"


def _env(**values):
    env = {f"{PREFIX}{name}": None for name in ("FOO", "BAR", "BAZ", "BOOM")}
    env.update({f"{PREFIX}{name.upper()}": value for name, value in values.items()})
    return env


def test_show_prints_config():
    """Test show parses and prints every field."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ['show', '--prefix', PREFIX],
        env=_env(foo="8080", bar="true", baz="hello", boom="42"),
    )
    assert result.exit_code == 0, result.output
    assert "foo = 8080" in result.output
    assert "bar = True" in result.output
    assert "baz = 'hello'" in result.output
    assert "boom = 42" in result.output


def test_show_optional_absent():
    """Test an unset optional field prints as None."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ['show', '-p', PREFIX],
        env=_env(foo="1", bar="0", baz="x"),
    )
    assert result.exit_code == 0, result.output
    assert "boom = None" in result.output


def test_show_reports_errors():
    """Test parse errors are printed and exit with status 1."""
    runner = CliRunner()
    result = runner.invoke(
        cli, ['show', '--prefix', PREFIX],
        env=_env(foo="70000", bar="true", baz="x"),
    )
    assert result.exit_code == 1
    assert "error parsing config from env" in result.output
    assert f"{PREFIX}FOO" in result.output


def test_show_missing_field():
    """Test a missing required variable is reported."""
    runner = CliRunner()
    result = runner.invoke(cli, ['show', '--prefix', PREFIX], env=_env())
    assert result.exit_code == 1
    assert "missing required field 'foo'" in result.output


def test_show_with_env_file(tmp_path):
    """Test show reads defaults from an env file."""
    env_file = tmp_path / "demo.env"
    env_file.write_text(f"{PREFIX}FOO=9\n{PREFIX}BAR=1\n{PREFIX}BAZ=file\n")
    runner = CliRunner()
    result = runner.invoke(
        cli, ['show', '--prefix', PREFIX, '--env-file', str(env_file)],
        env=_env(),
    )
    assert result.exit_code == 0, result.output
    assert "foo = 9" in result.output
    assert "baz = 'file'" in result.output


def test_keys_lists_variables():
    """Test keys prints each variable with its type and status."""
    runner = CliRunner()
    result = runner.invoke(cli, ['keys', '--prefix', 'APP_'])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert lines == [
        "APP_FOO\tu16\trequired",
        "APP_BAR\tbool\trequired",
        "APP_BAZ\tstr\trequired",
        "APP_BOOM\tOptional[u64]\toptional",
    ]


def test_version():
    """Test --version prints the package version."""
    runner = CliRunner()
    result = runner.invoke(cli, ['--version'])
    assert result.exit_code == 0
    assert __version__ in result.output
