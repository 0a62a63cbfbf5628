import pytest

from datastructs.vector import Vector


def _filled(values):
    vector = Vector()
    for value in values:
        vector.push_back(value)
    return vector


def test_new_vector_is_zero_filled():
    vector = Vector(5)
    assert len(vector) == 5
    assert [vector.get(i) for i in range(5)] == [0] * 5


def test_set_get_and_push_back():
    vector = Vector(5)
    for i, value in enumerate((10, 20, 30, 40, 50)):
        vector.set(i, value)
    vector.push_back(60)
    assert list(vector) == [10, 20, 30, 40, 50, 60]
    assert (vector.front(), vector.back()) == (10, 60)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


@pytest.mark.parametrize("index", [-1, 3, 10])
@pytest.mark.parametrize(
    "operation",
    [
        lambda vector, index: vector.get(index),
        lambda vector, index: vector.set(index, 1),
        lambda vector, index: vector.pop(index),
    ],
    ids=["get", "set", "pop"],
)
def test_out_of_range_access(operation, index):
    with pytest.raises(IndexError):
        operation(Vector(3), index)


@pytest.mark.parametrize("accessor", [Vector.front, Vector.back], ids=["front", "back"])
def test_front_back_of_empty(accessor):
    with pytest.raises(IndexError):
        accessor(Vector())


def test_capacity_doubles_when_reached():
    vector = Vector()
    initial = vector.capacity
    while len(vector) < initial - 1:
        vector.push_back(len(vector))
    assert vector.capacity == initial
    vector.push_back(len(vector))
    assert vector.capacity == 2 * initial
    assert list(vector) == list(range(initial))


@pytest.mark.parametrize("value, expected", [(6, 1), (5, 0), (42, -1)])
def test_find(value, expected):
    assert _filled([5, 6, 7, 6]).find(value) == expected


def test_insert_and_pop_round_trip():
    values = [1, 2, 3, 4]
    vector = _filled(values)
    vector.insert(2, 99)
    assert vector.get(2) == 99
    assert len(vector) == len(values) + 1
    assert vector.pop(2) == 99
    assert list(vector) == values
    vector.insert(len(vector), 5)
    assert vector.back() == 5
    with pytest.raises(IndexError):
        vector.insert(len(vector) + 1, 0)


def test_right_then_left_rotation_restores():
    values = [1, 2, 3, 4, 5]
    vector = _filled(values)
    vector.right_rotate(2)
    assert list(vector) == values[-2:] + values[:-2]
    for _ in range(2):
        vector.left_rotate()
    assert list(vector) == values


def test_single_rotations():
    values = [1, 2, 3]
    vector = _filled(values)
    vector.right_rotate()
    assert list(vector) == [3, 1, 2]
    vector.left_rotate()
    assert list(vector) == values


def test_rotation_by_length_is_identity():
    values = [4, 5, 6]
    vector = _filled(values)
    vector.right_rotate(len(values))
    assert list(vector) == values
    empty = Vector()
    empty.right_rotate(3)
    empty.left_rotate()
    assert len(empty) == 0


@pytest.mark.parametrize(
    "value, expected_index, expected_values",
    [(3, 1, [1, 3, 2]), (3, 0, [3, 1, 2]), (3, 0, [3, 1, 2]), (42, -1, [3, 1, 2])],
)
def test_find_transposition_step(value, expected_index, expected_values, request):
    vector = request.node.__dict__.setdefault("_unused", None) or _filled([1, 2, 3])
    # Replay the sequence up to this step so each case is independent.
    steps = [(3, [1, 3, 2]), (3, [3, 1, 2]), (3, [3, 1, 2]), (42, [3, 1, 2])]
    position = request.node.callspec.indices["value"]
    for previous_value, _ in steps[:position]:
        vector.find_transposition(previous_value)
    assert vector.find_transposition(value) == expected_index
    assert list(vector) == expected_values