import nox

# Standard locations for the code
LOCATIONS = [
    "packages/core/src",
    "packages/persistence/mongo/src",
    "packages/core/tests",
    "packages/persistence/mongo/tests",
    "tests",
]


@nox.session(python=["3.10", "3.11", "3.12"])
def tests(session: nox.Session) -> None:
    """Run the unit test suite with coverage."""
    session.install("-e", ".[test]")
    session.run(
        "pytest",
        "--cov=entity_mapper_core",
        "--cov=entity_mapper_mongo",
        "-m",
        "not integration",
        *session.posargs,
    )


@nox.session(python=["3.12"])
def integration(session: nox.Session) -> None:
    """Run tests against a real MongoDB container."""
    session.install("-e", ".[test,integration]")
    session.run("pytest", "--no-cov", "-m", "integration", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12"])
def autoformat(session: nox.Session) -> None:
    """Fix linting issues and format code."""
    session.install("ruff")
    session.run("ruff", "check", "--fix", ".")
    session.run("ruff", "format", ".")


@nox.session(python=["3.10", "3.11", "3.12"])
def lint(session: nox.Session) -> None:
    """Run ruff linter and formatter checks."""
    session.install("ruff")
    session.run("ruff", "check", ".")
    session.run("ruff", "format", "--check", ".")


@nox.session(python=["3.10", "3.11", "3.12"])
def type_check(session: nox.Session) -> None:
    """Run mypy static type analysis."""
    session.install("-e", ".[test]")
    session.install("mypy")
    session.run("mypy", "packages/core/src", "packages/persistence/mongo/src")


@nox.session(python=["3.10", "3.11", "3.12"])
def arch_check(session: nox.Session) -> None:
    """Verify architectural boundaries using pytest-archon."""
    session.install("-e", ".[test]")
    session.run("pytest", "--no-cov", "tests/architecture", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12"])
def dead_code(session: nox.Session) -> None:
    """Scan for unused code using vulture."""
    session.install("vulture")
    session.run("vulture", *LOCATIONS)
