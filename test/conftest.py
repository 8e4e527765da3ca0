import pytest
import json


@pytest.fixture
def tmp_context(tmp_path):
    """This fixture is used to create a game's install context in an empty directory.
    """

    from wmml.standard import Context
    return Context(tmp_path / "main")


@pytest.fixture
def install_version(tmp_context):
    """This fixture returns a function installing a version's metadata in the temporary
    context, the metadata can be any JSON value.
    """

    def install(version_id: str, metadata) -> None:
        handle = tmp_context.get_version(version_id)
        handle.dir.mkdir(parents=True, exist_ok=True)
        with handle.metadata_file().open("wt", encoding="utf-8") as fp:
            json.dump(metadata, fp)

    return install


@pytest.fixture
def install_library(tmp_context):
    """This fixture returns a function creating an empty library file in the temporary
    context given its relative path, the absolute path is returned.
    """

    def install(rel_path: str):
        path = tmp_context.libraries_dir / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
        return path

    return install
