import pytest

from dsakit.arrays import remove_duplicates, union


def test_remove_duplicates_pinned_example():
    assert remove_duplicates([1, 2, 1, 3, 2, 4]) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "data",
    [
        [],
        [5],
        [7, 7, 7, 7],
        [3, 1, 3, 2, 1, 5, 5, 0],
        list(range(20)) * 3,
    ],
)
def test_remove_duplicates_invariants(data):
    result = remove_duplicates(data)
    assert len(result) == len(set(result))
    assert set(result) == set(data)
    positions = [data.index(value) for value in result]
    assert positions == sorted(positions)


def test_remove_duplicates_leaves_input_alone():
    data = [2, 2, 1]
    remove_duplicates(data)
    assert data == [2, 2, 1]


def test_remove_duplicates_accepts_generator():
    assert remove_duplicates(x % 3 for x in range(9)) == [0, 1, 2]


def test_union_pinned_example():
    assert union([1, 2, 2, 3], [3, 4, 1, 4]) == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "first, second",
    [
        ([], []),
        ([1, 2, 3], []),
        ([], [4, 4, 5]),
        ([9, 8, 9], [8, 7, 6, 7]),
        ([1, 2, 3], [1, 2, 3]),
    ],
)
def test_union_invariants(first, second):
    result = union(first, second)
    assert len(result) == len(set(result))
    assert set(result) == set(first) | set(second)
    prefix = remove_duplicates(first)
    assert result[: len(prefix)] == prefix
    assert all(value not in first for value in result[len(prefix):])


def test_union_with_itself_is_deduplicated():
    data = [4, 1, 4, 2]
    assert union(data, data) == remove_duplicates(data)


def test_union_rejects_unhashable():
    with pytest.raises(TypeError):
        union([[1]], [[2]])