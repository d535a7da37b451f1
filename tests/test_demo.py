import numpy as np
import pytest

from classic_structures.demo import heap_demo, linked_list_demo, random_items, main


def test_heap_demo_prints_every_state():
    lines = []
    heap, extracted = heap_demo(check=True, out=lines.append)
    assert extracted == [30, 20, 17, 15, 13]
    assert len(heap) == 5
    assert lines[0] == "insert 10: [10]"
    assert lines[9] == "insert 17: [30, 17, 20, 13, 15, 9, 11, 5, 10, 7]"
    assert lines[10].startswith("extract_max -> 30: ")
    assert len(lines) == 15


def test_heap_demo_survives_empty_extraction():
    lines = []
    heap, extracted = heap_demo([0], 3, out=lines.append)
    assert extracted == [0]
    assert lines[-2:] == ["extract_max: heap is empty", "extract_max: heap is empty"]
    assert heap.is_empty()


def test_linked_list_demo():
    lines = []
    linked_list = linked_list_demo(out=lines.append)
    assert linked_list.to_list() == [235, 3, 62, 32, 9]
    assert lines[0] == "11 52 351 235 3 62 52 32 9"
    assert "Linked list length is: 7" in lines
    assert "search result: 235" in lines
    assert "search result: None" in lines
    assert lines[-2] == "Empty linked list length is: 0"


def test_random_items_are_seeded():
    first = random_items(10, rng=np.random.default_rng(3))
    second = random_items(10, rng=np.random.default_rng(3))
    assert first == second
    assert all(0 <= v < 100 for v in first)


def test_cli_heapsort(capsys):
    assert main(["heapsort", "3", "1", "2"]) == 0
    assert capsys.readouterr().out == "[3, 2, 1]\n"


def test_cli_heap_random(capsys):
    assert main(["heap", "--random", "6", "--seed", "1", "--extractions", "7", "--check"]) == 0
    out = capsys.readouterr().out
    assert out.count("insert ") == 6
    assert "extract_max: heap is empty" in out


def test_cli_linked_list(capsys):
    assert main(["linked-list", "--items", "1", "2"]) == 0
    assert capsys.readouterr().out.startswith("2 1\n")


def test_cli_requires_command():
    with pytest.raises(SystemExit):
        main([])
