import pytest

# one distinct color per group, highest priority first
TEST_RULES = r'''
[strings]
patterns = ['"[^"]*"']
color = "1, 0, 0"

[comments]
patterns = ['//.*$']
color = "2, 0, 0"

[numbers]
patterns = ['\d+']
color = "3, 0, 0"

[keywords]
patterns = ["let", "if", "x1"]
color = "4, 0, 0"

[types]
patterns = ["int"]
color = "5, 0, 0"

[methods]
patterns = ['\w+(?=\()']
color = "6, 0, 0"

[operators]
patterns = ["=", "+"]
color = "7, 0, 0"
'''


@pytest.fixture
def syntax_dir(tmp_path):
    tmp_path.joinpath('javascript.toml').write_text(TEST_RULES)
    return tmp_path
