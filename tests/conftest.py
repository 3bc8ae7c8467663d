import pytest

from radixcomplete import RadixTrie

SAMPLE_WORDS = ["bear", "bell", "bull", "stock"]


@pytest.fixture
def sample_trie():
    return RadixTrie(SAMPLE_WORDS)
