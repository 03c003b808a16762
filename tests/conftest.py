import pytest
from click.testing import CliRunner

from gockerfile.models.build import BuildConfig


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def go_workspace(tmp_path):
    """Creates a project directory inside a GOPATH style workspace."""
    project_path = tmp_path / "go" / "src" / "example.com" / "proj"
    project_path.mkdir(parents=True)
    (project_path / "main.go").write_text("package main\n\nfunc main() {}\n")
    return project_path


@pytest.fixture
def in_go_workspace(go_workspace, monkeypatch):
    """Runs the test with the workspace project as working directory."""
    monkeypatch.chdir(go_workspace)
    return go_workspace


@pytest.fixture
def build_config():
    """Provides a build configuration without dependency markers."""
    return BuildConfig(
        import_path="example.com/proj",
        binary_name="proj",
        entry_package="example.com/proj"
    )
