"""Randomized checks over long operation sequences."""
import sys
import os
import random
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from autoline.buffer import AutocorrectBuffer, WORD_DELIMITERS, SENTENCE_DELIMITERS
from autoline.dictionary import Dictionary
from autoline.distance import distance, similarity

ALPHABET = "abehlortw"
KEYS = ALPHABET + " ,:;.?!"


def test_render_is_committed_plus_pending():
    rng = random.Random(1234)
    for _ in range(50):
        buf = AutocorrectBuffer(Dictionary(["hello", "world", "the", "i", "a"]))
        for _ in range(200):
            op = rng.random()
            if op < 0.75:
                buf.insert_char(rng.choice(KEYS))
            elif op < 0.9:
                buf.delete_char()
            else:
                buf.delete_word()
            assert buf.render() == buf.committed + buf.pending
            assert not (set(buf.pending) & (WORD_DELIMITERS | SENTENCE_DELIMITERS))


def test_distance_properties():
    rng = random.Random(42)
    for _ in range(300):
        a = ''.join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 8)))
        b = ''.join(rng.choice(ALPHABET) for _ in range(rng.randint(0, 8)))
        d = distance(a, b)
        assert d == distance(b, a)
        assert abs(len(a) - len(b)) <= d <= max(len(a), len(b))
        assert distance("", a) == len(a)
        if a and b:
            assert (similarity(a, b) == 1.0) == (d == 0)


if __name__ == '__main__':
    test_render_is_committed_plus_pending()
    test_distance_properties()
    print("All property tests passed.")
