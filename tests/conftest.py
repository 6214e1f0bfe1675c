import pytest

DEFAULT_TREE = {
    "samples": [1, 2],
    "subtask1": [3, 4, 5],
}


@pytest.fixture
def make_tree(tmp_path):
    """
    Build a test root below tmp_path, mapping each directory name to the test numbers it holds
    """
    def build(groups=None, answer_suffix=".a"):
        root = tmp_path / "tests"
        root.mkdir()
        for directory, tests in (groups or DEFAULT_TREE).items():
            path = root / directory
            path.mkdir()
            for test in tests:
                (path / f"{test:02d}").write_text(f"{test}\n")
                (path / f"{test:02d}{answer_suffix}").write_text(f"{test * 2}\n")
        return root

    return build
