import pytest

from pathgrid.frontier import HeapFrontier, ScanFrontier


@pytest.fixture(params=[ScanFrontier, HeapFrontier])
def frontier(request):
    return request.param()


def test_empty_frontier(frontier):
    assert len(frontier) == 0
    assert not frontier
    with pytest.raises(IndexError):
        frontier.extract_min()


def test_extract_min_orders_by_score(frontier):
    frontier.insert_or_update((1, 1), 5.0)
    frontier.insert_or_update((2, 2), 1.5)
    frontier.insert_or_update((3, 3), 3.0)
    assert len(frontier) == 3
    assert (2, 2) in frontier
    assert [frontier.extract_min() for _ in range(3)] == [
        (2, 2),
        (3, 3),
        (1, 1),
    ]
    assert not frontier
    assert (2, 2) not in frontier


def test_update_lowers_score(frontier):
    frontier.insert_or_update((1, 1), 5.0)
    frontier.insert_or_update((2, 2), 3.0)
    frontier.insert_or_update((1, 1), 1.0)
    # Updating does not duplicate the member
    assert len(frontier) == 2
    assert frontier.extract_min() == (1, 1)
    assert frontier.extract_min() == (2, 2)
    with pytest.raises(IndexError):
        frontier.extract_min()


def test_ties_go_to_earliest_inserted(frontier):
    frontier.insert_or_update((3, 1), 2.0)
    frontier.insert_or_update((1, 1), 2.0)
    frontier.insert_or_update((2, 1), 2.0)
    assert frontier.extract_min() == (3, 1)
    assert frontier.extract_min() == (1, 1)
    assert frontier.extract_min() == (2, 1)


def test_scan_update_keeps_position():
    frontier = ScanFrontier()
    frontier.insert_or_update("a", 5.0)
    frontier.insert_or_update("b", 3.0)
    frontier.insert_or_update("c", 3.0)
    frontier.insert_or_update("a", 3.0)
    # "a" was inserted first, so it wins the three-way tie
    assert frontier.extract_min() == "a"
    assert frontier.extract_min() == "b"


def test_heap_update_is_a_new_push():
    frontier = HeapFrontier()
    frontier.insert_or_update("a", 5.0)
    frontier.insert_or_update("b", 3.0)
    frontier.insert_or_update("a", 3.0)
    # The update to "a" is pushed after "b"
    assert frontier.extract_min() == "b"
    assert frontier.extract_min() == "a"
