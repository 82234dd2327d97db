import pytest

from gallerygen import Config


@pytest.fixture
def source_dir(tmp_path):
    path = tmp_path / "pics"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path):
    return tmp_path / "site"


@pytest.fixture
def config(source_dir, output_dir):
    """Pipeline config pointed at temporary directories, no batch pause."""
    return Config(source_dir=source_dir, output_dir=output_dir, batch_pause=0)
