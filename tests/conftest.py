import pytest


@pytest.fixture()
def example_words():
    return [
        "cat",
        "cats",
        "catsdogcats",
        "catxdogcatsrat",
        "dog",
        "dogcatsdog",
        "hippopotamuses",
        "rat",
        "ratcatdogcat",
    ]


@pytest.fixture(params=[False, True], ids=["hash", "trie"])
def use_trie(request):
    return request.param


@pytest.fixture()
def word_file(tmp_path, example_words):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(example_words) + "\n", encoding="utf-8")
    return path
