import copy
import threading
import uuid

import pytest

from patternkit.leaderboard import GlobalLeaderboard, get_leaderboard, main


def _name():
    return f"player-{uuid.uuid4().hex}"


def test_single_instance():
    assert get_leaderboard() is get_leaderboard()
    assert GlobalLeaderboard() is get_leaderboard()


def test_insert_then_lookup():
    name = _name()
    board = get_leaderboard()
    board.insert(name, 42)
    assert board.lookup(name) == 42


def test_missing_user_returns_minus_one():
    assert get_leaderboard().lookup(_name()) == -1


def test_lookup_returns_lowest_score_for_repeated_user():
    name = _name()
    board = get_leaderboard()
    board.insert(name, 300)
    board.insert(name, 50)
    board.insert(name, 200)
    assert board.lookup(name) == 50


def test_entries_sorted_by_score():
    board = get_leaderboard()
    board.insert(_name(), 7)
    board.insert(_name(), 3)
    scores = [score for _, score in board]
    assert scores == sorted(scores)


def test_state_shared_across_accessors():
    name = _name()
    GlobalLeaderboard().insert(name, 11)
    assert get_leaderboard().lookup(name) == 11


def test_copy_is_refused():
    with pytest.raises(TypeError):
        copy.copy(get_leaderboard())
    with pytest.raises(TypeError):
        copy.deepcopy(get_leaderboard())


def test_concurrent_access_yields_one_instance():
    name = _name()
    seen = []
    lock = threading.Lock()

    def worker(index):
        board = get_leaderboard()
        board.insert(f"{name}-{index}", index)
        with lock:
            seen.append(board)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    expected = get_leaderboard()
    assert len(seen) == 8
    assert all(board is expected for board in seen)
    assert [expected.lookup(f"{name}-{i}") for i in range(8)] == list(range(8))


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Alice's score: 100"
    assert lines[1] == "Bob's score: 150"
    assert lines[2] == "Charlie's score: 120"