import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]


def _install(session: nox.Session) -> None:
    """Install the project with the test extras into the nox virtualenv."""
    session.install("-e", ".[test]")


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run aggregate-level tests only (no HTTP, no dispatcher)."""
    _install(session)
    session.run("pytest", "tests/shelf/domain/")


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_postgresql(session: nox.Session) -> None:
    """Run the suite against PostgreSQL (needs DATABASE_URL)."""
    session.install("-e", ".[test,postgresql]")
    session.run("pytest", "--env", "production")
