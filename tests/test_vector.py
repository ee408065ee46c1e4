import pytest

from gbdcheck.vector import Vector


def test_empty_vector_has_no_capacity():
    vec = Vector()
    assert len(vec) == 0
    assert vec.capacity == 0
    assert list(vec) == []


def test_initial_items_kept_in_order():
    vec = Vector([1, 2, 3])
    assert list(vec) == [1, 2, 3]
    assert vec.capacity == len(vec)


def test_first_insert_sets_capacity_to_count():
    vec = Vector()
    vec.push_back(["a", "b", "c", "d"])
    assert vec.capacity == 4


def test_growth_doubles_when_enough():
    vec = Vector([1, 2, 3])
    old = vec.capacity
    vec.push_back([4])
    assert vec.capacity == old * 2
    assert list(vec) == [1, 2, 3, 4]


def test_growth_exact_when_doubling_insufficient():
    vec = Vector([1])
    vec.push_back([2, 3, 4, 5])
    assert vec.capacity == len(vec)


def test_no_growth_when_room_available():
    vec = Vector([1, 2])
    vec.reserve(10)
    cap = vec.capacity
    vec.push_back([3, 4])
    assert vec.capacity == cap


def test_insert_in_middle_returns_position():
    vec = Vector([1, 4])
    pos = vec.insert(1, [2, 3])
    assert pos == 1
    assert list(vec) == [1, 2, 3, 4]


def test_insert_at_front():
    vec = Vector([2])
    vec.insert(0, [1])
    assert vec[0] == 1
    assert vec.at(1) == 2


def test_insert_empty_raises():
    vec = Vector([1])
    with pytest.raises(ValueError):
        vec.insert(0, [])


def test_insert_past_end_raises():
    vec = Vector([1])
    with pytest.raises(IndexError):
        vec.insert(2, [5])


def test_push_back_returns_start_position():
    vec = Vector([1, 2])
    assert vec.push_back([3]) == 2


def test_at_out_of_range():
    vec = Vector([1, 2])
    with pytest.raises(IndexError):
        vec.at(2)
    with pytest.raises(IndexError):
        vec.at(-1)


def test_reserve_reports_growth():
    vec = Vector([1, 2])
    assert vec.reserve(5) is True
    assert vec.capacity == len(vec) + 5
    assert vec.reserve(1) is False


def test_delete_middle():
    vec = Vector([1, 2, 3, 4, 5])
    cap = vec.capacity
    vec.delete(1, 2)
    assert list(vec) == [1, 4, 5]
    assert vec.capacity == cap


def test_delete_all_clears():
    vec = Vector([1, 2, 3])
    vec.delete(0, 3)
    assert len(vec) == 0


def test_delete_whole_length_from_nonzero_position_clears():
    vec = Vector([1, 2, 3])
    vec.delete(1, 3)
    assert list(vec) == []


def test_delete_errors():
    vec = Vector([1, 2, 3])
    with pytest.raises(IndexError):
        vec.delete(3, 1)
    with pytest.raises(IndexError):
        vec.delete(0, 4)
    with pytest.raises(IndexError):
        vec.delete(2, 2)
    with pytest.raises(IndexError):
        Vector().delete(0, 0)


def test_shrink_to_fit():
    vec = Vector([1, 2, 3])
    vec.push_back([4])
    vec.shrink_to_fit()
    assert vec.capacity == len(vec)


def test_release_resets():
    vec = Vector(["x", "y"])
    data = vec.release()
    assert data == ["x", "y"]
    assert len(vec) == 0
    assert vec.capacity == 0


def test_clear_keeps_capacity():
    vec = Vector([1, 2, 3])
    cap = vec.capacity
    vec.clear()
    assert len(vec) == 0
    assert vec.capacity == cap


def test_reversed_iteration():
    vec = Vector([1, 2, 3])
    assert list(reversed(vec)) == [3, 2, 1]


def test_capacity_never_below_length():
    vec = Vector()
    for chunk in ([1], [2, 3], [4, 5, 6, 7], [8]):
        vec.push_back(chunk)
        assert vec.capacity >= len(vec)
    assert list(vec) == [1, 2, 3, 4, 5, 6, 7, 8]