import random

from costar.priority_queue import IndexedPriorityQueue, child_indices, parent_index


def _assert_heap_order(queue: IndexedPriorityQueue) -> None:
    priorities = queue.priorities()
    for index in range(1, len(priorities)):
        assert priorities[parent_index(index)] <= priorities[index], (index, priorities)


def test_parent_uses_integer_halving() -> None:
    assert parent_index(1) == 0
    assert parent_index(2) == 1
    assert parent_index(3) == 1
    assert parent_index(7) == 3
    assert child_indices(0) == (1,)
    assert child_indices(3) == (6, 7)
    for index in range(1, 64):
        assert index in child_indices(parent_index(index))


def test_extract_min_returns_non_decreasing_priorities() -> None:
    rng = random.Random(7)
    queue: IndexedPriorityQueue[int, str] = IndexedPriorityQueue()
    for node in range(200):
        queue.insert_or_decrease_priority(node, rng.randint(0, 1000), f"m{node}")
        _assert_heap_order(queue)

    for node in rng.sample(range(200), 80):
        current = queue.get_priority(node)
        assert current is not None
        queue.insert_or_decrease_priority(node, max(0, current - rng.randint(0, 500)), "decreased")
        _assert_heap_order(queue)

    extracted: list[int] = []
    while queue:
        node = queue.peek_min()
        priority = queue.get_priority(node)
        assert queue.extract_min() == node
        extracted.append(priority)
        _assert_heap_order(queue)

    assert len(extracted) == 200
    assert extracted == sorted(extracted)


def test_decrease_only_applies_to_strictly_smaller_priority() -> None:
    queue: IndexedPriorityQueue[str, str] = IndexedPriorityQueue()
    assert queue.insert_or_decrease_priority("a", 10, "first") is True

    assert queue.insert_or_decrease_priority("a", 10, "tie") is False
    assert queue.insert_or_decrease_priority("a", 15, "worse") is False
    assert queue.get_priority("a") == 10
    assert queue.get_metadata("a") == "first"

    assert queue.insert_or_decrease_priority("a", 3, "better") is True
    assert queue.get_priority("a") == 3
    assert queue.get_metadata("a") == "better"


def test_unknown_and_extracted_nodes_are_absent() -> None:
    queue: IndexedPriorityQueue[int, None] = IndexedPriorityQueue()
    assert queue.get_priority(1) is None
    assert queue.get_metadata(1) is None

    queue.insert_or_decrease_priority(1, 4, None)
    queue.insert_or_decrease_priority(2, 1, None)
    assert queue.extract_min() == 2
    assert queue.get_priority(2) is None
    assert 2 not in queue
    assert 1 in queue


def test_empty_queue_reports_empty_instead_of_raising() -> None:
    queue: IndexedPriorityQueue[int, None] = IndexedPriorityQueue()
    assert queue.peek_min() is None
    assert queue.extract_min() is None
    assert len(queue) == 0

    queue.insert_or_decrease_priority(5, 0, None)
    assert queue.extract_min() == 5
    assert queue.extract_min() is None
    assert not queue


def test_insert_reuses_slots_freed_by_extraction() -> None:
    queue: IndexedPriorityQueue[int, None] = IndexedPriorityQueue()
    for node in range(4):
        queue.insert_or_decrease_priority(node, node, None)
    queue.extract_min()
    queue.extract_min()
    capacity = len(queue._nodes)  # noqa: SLF001 - backing array capacity

    queue.insert_or_decrease_priority(10, 0, None)
    assert len(queue._nodes) == capacity  # noqa: SLF001 - backing array capacity
    assert len(queue) == 3
    assert queue.peek_min() == 10
    _assert_heap_order(queue)


def test_reinserting_extracted_node_starts_fresh() -> None:
    queue: IndexedPriorityQueue[str, int] = IndexedPriorityQueue()
    queue.insert_or_decrease_priority("x", 2, 1)
    queue.extract_min()
    queue.insert_or_decrease_priority("x", 9, 2)
    assert queue.get_priority("x") == 9
    assert queue.get_metadata("x") == 2
