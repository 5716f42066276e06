import pytest

from wordhelper.dictionary import Dictionary


@pytest.fixture
def words():
    return [
        'CAT', 'COT', 'CUT', 'DOG', 'ACT', 'AT',
        'ABLE', 'EDGE', 'TREE', 'AXE',
        'LLAMA', 'LEMON', 'LILAC', 'LOLLY', 'SLATE', 'PIECE', 'CRANE',
        'ROBED', 'BREAD', 'BEARD', 'READ', 'CROWD', 'BROWN', 'SHOW', 'OWN',
    ]


@pytest.fixture
def dictionary(words):
    return Dictionary(words)


@pytest.fixture
def dictfile(tmp_path, words):
    path = tmp_path / 'words.txt'
    path.write_text('\n'.join(words) + '\n')
    return path
