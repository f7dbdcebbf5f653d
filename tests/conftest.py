import pytest


def pytest_configure():
    """Add the src directory to the Python path before any tests run."""
    import sys
    from pathlib import Path

    # Add src directory to Python path
    src_dir = Path(__file__).parent.parent / "src"
    if str(src_dir) not in sys.path:
        sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_argv():
    """Argument vector exercising every classification branch."""
    return ["./bin", "-fx", "--verbose", "foo", "bar", "--", "from", "to"]


@pytest.fixture
def debug_enabled(monkeypatch):
    """Switch on debug output for the duration of a test."""
    monkeypatch.setenv("ARGCFG_DEBUG", "1")


@pytest.fixture
def debug_disabled(monkeypatch):
    """Make sure debug output is off regardless of the outer environment."""
    monkeypatch.delenv("ARGCFG_DEBUG", raising=False)


@pytest.fixture
def mock_process_argv(mocker):
    """
    Fixture to replace the live process argument vector.

    Usage:
        def test_something(mock_process_argv):
            mock_process_argv(["./bin", "-v"])
            config = ArgumentProcessor.from_process()
    """

    def _set(argv):
        return mocker.patch("sys.argv", list(argv))

    return _set
