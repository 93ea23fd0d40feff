import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Writes the given YAML text to a configuration file and returns its path."""

    def _write(text: str):
        fn = tmp_path / "requirements.yaml"
        fn.write_text(text)
        return str(fn)

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "CREDENTIAL_GUARD_USERNAME",
        "CREDENTIAL_GUARD_PASSWORD",
        "CREDENTIAL_GUARD_PLAYER_NAME",
    ):
        monkeypatch.delenv(name, raising=False)
