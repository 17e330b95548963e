import random

import pytest

from spojkit.beads import main, minimal_rotation, minimal_rotation_brute, solve


def _rotate(text, start):
    return text[start:] + text[:start]


def test_sample():
    text = "4\nhelloworld\namandamanda\ndontcallmebfu\naaabaaa\n"
    assert solve(text) == "10\n11\n6\n5\n"


@pytest.mark.parametrize("necklace", ["a", "aaaa", "abab", "baba", "zyx", "abcabcab", "bbbbba"])
def test_fast_matches_brute(necklace):
    assert minimal_rotation(necklace) == minimal_rotation_brute(necklace)


def test_fast_matches_brute_on_random_necklaces():
    rng = random.Random(11)
    for _ in range(300):
        alphabet = rng.choice(["ab", "abc", "abcdefghijklmnopqrstuvwxyz"])
        necklace = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 25)))
        if rng.random() < 0.3:
            necklace *= rng.randint(2, 4)
        assert minimal_rotation(necklace) == minimal_rotation_brute(necklace)


def test_result_is_smallest_and_earliest():
    rng = random.Random(3)
    for _ in range(100):
        necklace = "".join(rng.choice("abc") for _ in range(rng.randint(1, 15)))
        start = minimal_rotation(necklace) - 1
        best = _rotate(necklace, start)
        rotations = [_rotate(necklace, k) for k in range(len(necklace))]
        assert all(best <= other for other in rotations)
        assert best not in rotations[:start]


def test_empty_necklace_is_rejected():
    with pytest.raises(ValueError):
        minimal_rotation("")
    with pytest.raises(ValueError):
        minimal_rotation_brute("")


def test_main_reads_file(tmp_path, capsys):
    text = "2\nhelloworld\naaabaaa\n"
    path = tmp_path / "test"
    path.write_text(text)
    main([str(path)])
    assert capsys.readouterr().out == solve(text)