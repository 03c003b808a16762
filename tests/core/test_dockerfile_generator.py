import os
from unittest.mock import patch

import pytest

from gockerfile.core.dockerfile_generator import DockerfileGenerator
from gockerfile.core.exceptions import TemplateError, WriteError


class TestDockerfileGenerator:
    """Tests for writing generated Dockerfiles."""

    def test_dockerfile_generator_initialization(self, go_workspace):
        """Test that DockerfileGenerator initializes correctly."""
        generator = DockerfileGenerator(go_workspace)
        assert generator.project_root == go_workspace
        assert generator.dockerfile_path == go_workspace / "Dockerfile"

    def test_write_creates_dockerfile(self, go_workspace, build_config):
        """Test that write creates the Dockerfile with the rendered content."""
        generator = DockerfileGenerator(go_workspace)

        path = generator.write(build_config)

        assert path == go_workspace / "Dockerfile"
        assert path.read_text() == generator.render(build_config)

    def test_write_overwrites_existing_file(self, go_workspace, build_config):
        """Test that an existing Dockerfile is replaced entirely."""
        existing = go_workspace / "Dockerfile"
        existing.write_text("FROM scratch\n" * 100)

        DockerfileGenerator(go_workspace).write(build_config)

        content = existing.read_text()
        assert "FROM scratch" not in content
        assert content.startswith("# Build the binary in docker container")

    def test_write_is_idempotent(self, go_workspace, build_config):
        """Test that writing twice produces byte-identical files."""
        generator = DockerfileGenerator(go_workspace)

        first = generator.write(build_config).read_bytes()
        second = generator.write(build_config).read_bytes()

        assert first == second

    def test_write_leaves_no_temp_files(self, go_workspace, build_config):
        """Test that only the Dockerfile is added to the project."""
        before = set(os.listdir(go_workspace))

        DockerfileGenerator(go_workspace).write(build_config)

        assert set(os.listdir(go_workspace)) - before == {"Dockerfile"}

    @patch('gockerfile.core.dockerfile_generator.generate_dockerfile')
    def test_failed_render_keeps_existing_file(self, mock_generate_dockerfile, go_workspace, build_config):
        """Test that a render failure never touches the output file."""
        mock_generate_dockerfile.side_effect = TemplateError("boom")
        existing = go_workspace / "Dockerfile"
        existing.write_text("FROM scratch\n")

        with pytest.raises(TemplateError):
            DockerfileGenerator(go_workspace).write(build_config)

        assert existing.read_text() == "FROM scratch\n"
        assert set(os.listdir(go_workspace)) == {"main.go", "Dockerfile"}

    @patch('gockerfile.core.dockerfile_generator.os.replace')
    def test_write_error_is_raised(self, mock_replace, go_workspace, build_config):
        """Test that filesystem errors surface as WriteError and clean up."""
        mock_replace.side_effect = PermissionError("read-only")

        with pytest.raises(WriteError, match="Cannot write"):
            DockerfileGenerator(go_workspace).write(build_config)

        assert set(os.listdir(go_workspace)) == {"main.go"}

    def test_write_to_missing_directory(self, tmp_path, build_config):
        """Test writing into a directory that does not exist."""
        with pytest.raises(WriteError):
            DockerfileGenerator(tmp_path / "missing").write(build_config)
