"""Nox configuration for Menagerie quality assurance tasks."""

import nox  # pyright: ignore[reportMissingImports] # noqa: I001

# Configure nox to use uv for faster package installs
nox.options.default_venv_backend = "uv"

# Python versions to test
PYTHON_VERSIONS = ["3.13"]

# Centralized tool configurations
LINT_TOOL = ["uv", "tool", "run", "ruff", "check"]
LINT_PATHS = ["src/", "tests/"]
FORMAT_TOOL = ["uv", "tool", "run", "ruff", "format"]
FORMAT_PATHS = ["src/", "tests/"]
TYPECHECK_TOOL = ["uv", "tool", "run", "mypy"]
TYPECHECK_PATHS = ["src/", "tests/"]


def get_lint_command(fix: bool = False, unsafe: bool = False) -> list[str]:
    """Get lint command, optionally applying fixes."""
    cmd = LINT_TOOL + LINT_PATHS
    if fix:
        cmd.append("--fix")
        if unsafe:
            cmd.append("--unsafe-fixes")
    return cmd


def get_format_command(check: bool = False) -> list[str]:
    """Get format command, optionally only checking."""
    cmd = FORMAT_TOOL + FORMAT_PATHS
    if check:
        cmd.extend(["--check", "--diff"])
    return cmd


@nox.session(python=PYTHON_VERSIONS)
def lint(session: nox.Session) -> None:
    """Run linting with ruff check."""
    session.install("-e", ".[dev]")
    session.run(*get_lint_command(), external=True)


@nox.session(python=PYTHON_VERSIONS)
def mypy(session: nox.Session) -> None:
    """Run type checking with mypy."""
    session.install("-e", ".[dev]")
    session.run(*TYPECHECK_TOOL, *TYPECHECK_PATHS, external=True)


@nox.session(python=PYTHON_VERSIONS)
def format_check(session: nox.Session) -> None:
    """Check code formatting with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command(check=True), external=True)


@nox.session(python=PYTHON_VERSIONS)
def format(session: nox.Session) -> None:
    """Format code with ruff format."""
    session.install("-e", ".[dev]")
    session.run(*get_format_command(), external=True)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run tests with pytest."""
    session.install("-e", ".[test]")
    session.run("pytest", "--verbose")


@nox.session(python=PYTHON_VERSIONS)
def demo(session: nox.Session) -> None:
    """Run the demonstration end to end."""
    session.install("-e", ".")
    session.run("menagerie")
