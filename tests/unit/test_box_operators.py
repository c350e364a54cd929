"""Unit tests for Box equality, addition, conversions and sequence access."""

import pytest

from pudelko.domain import (
    Box,
    DimensionOutOfRangeError,
    IndexOutOfRangeError,
    UnitOfMeasure,
)


class TestEquality:
    """Tests for equality and hashing."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ((2.5, 9.321, 0.1), (2.5, 9.321, 0.1), True),
            ((1.0, 1.0, 1.0), (1.0, 1.0, 1.0), True),
            ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), True),
            ((2.5, 9.321, 0.1), (2.5, 9.321, 0.2), False),
            ((1, 2, 3), (1, 2, 4), False),
        ],
    )
    def test_equality(self, first, second, expected) -> None:
        p1 = Box(*first)
        p2 = Box(*second)
        assert p1.equals(p2) is expected
        assert (p1 == p2) is expected
        assert (p1 != p2) is not expected

    def test_permutations_are_equal(self) -> None:
        """Equality does not depend on the order of dimensions."""
        assert Box(1, 2, 3) == Box(3, 1, 2) == Box(2, 3, 1)

    def test_unit_is_ignored(self) -> None:
        assert Box(1, 2, 3) == Box(300, 100, 200, unit=UnitOfMeasure.CENTIMETER)
        assert Box(1, 2, 3) == Box(2000, 3000, 1000, unit=UnitOfMeasure.MILLIMETER)

    def test_equal_after_rounding(self) -> None:
        assert Box(1.0001, 2, 3) == Box(1, 2, 3)

    def test_not_equal_to_other_types(self) -> None:
        box = Box(1, 2, 3)
        assert box != (1, 2, 3)
        assert box != [1.0, 2.0, 3.0]
        assert box != None  # noqa: E711
        assert box.equals("1 m × 2 m × 3 m") is False

    def test_hash_is_permutation_invariant(self) -> None:
        assert hash(Box(1, 2, 3)) == hash(Box(3, 2, 1))
        assert len({Box(1, 2, 3), Box(2, 1, 3), Box(3, 2, 1)}) == 1

    def test_boxes_as_dict_keys(self) -> None:
        prices = {Box(1, 2, 3): 10}
        assert prices[Box(300, 200, 100, unit=UnitOfMeasure.CENTIMETER)] == 10

    def test_no_ordering_operators(self) -> None:
        with pytest.raises(TypeError):
            Box(1, 1, 1) < Box(2, 2, 2)  # noqa: B015


class TestAddition:
    """Tests for adding boxes."""

    @pytest.mark.parametrize(
        "first,second,expected",
        [
            ((1.0, 2.0, 3.0), (4.0, 5.0, 6.0), (5.0, 7.0, 9.0)),
            ((0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (1.0, 1.0, 1.0)),
        ],
    )
    def test_addition(self, assert_box, first, second, expected) -> None:
        result = Box(*first) + Box(*second)
        assert_box(result, *expected)

    def test_addition_is_position_wise(self, assert_box) -> None:
        """Dimensions are added by position, not in sorted order."""
        assert_box(Box(3, 1, 2) + Box(1, 2, 3), 4.0, 3.0, 5.0)

    def test_add_method(self) -> None:
        assert Box(1, 2, 3).add(Box(4, 5, 6)) == Box(5, 7, 9)

    def test_addition_across_units(self, assert_box) -> None:
        result = Box(10, 20, 30, unit=UnitOfMeasure.CENTIMETER) + Box(1, 1, 1)
        assert_box(result, 1.1, 1.2, 1.3)
        assert result.unit is UnitOfMeasure.METER

    def test_addition_up_to_bound(self, assert_box) -> None:
        assert_box(Box(5, 5, 9.999) + Box(5, 5, 0.001), 10.0, 10.0, 10.0)

    @pytest.mark.parametrize(
        "first,second",
        [
            ((6, 1, 1), (5, 1, 1)),
            ((1, 9.5, 1), (1, 0.501, 1)),
            ((1, 1, 10), (1, 1, 0.001)),
        ],
    )
    def test_addition_out_of_range(self, first, second) -> None:
        with pytest.raises(DimensionOutOfRangeError):
            Box(*first) + Box(*second)

    def test_adding_non_box(self) -> None:
        with pytest.raises(TypeError):
            Box(1, 2, 3) + 1  # type: ignore[operator]

    def test_operands_are_unchanged(self) -> None:
        p1 = Box(1, 2, 3)
        p2 = Box(4, 5, 6)
        _ = p1 + p2
        assert p1.to_array() == [1.0, 2.0, 3.0]
        assert p2.to_array() == [4.0, 5.0, 6.0]


class TestConversions:
    """Tests for array and millimeter conversions."""

    def test_to_array(self) -> None:
        box = Box(1, 2.1, 3.231)
        array = box.to_array()
        assert len(array) == 3
        assert array == [box.a, box.b, box.c]

    def test_to_array_returns_a_copy(self) -> None:
        box = Box(1, 2, 3)
        array = box.to_array()
        array[0] = 9.0
        assert box.a == 1.0

    def test_from_millimeters(self) -> None:
        a, b, c = (2500, 9321, 100)
        box = Box.from_millimeters(a, b, c)
        assert round(box.a * 1000) == a
        assert round(box.b * 1000) == b
        assert round(box.c * 1000) == c

    def test_from_millimeters_tuple(self) -> None:
        dimensions = (2500, 9321, 100)
        assert Box.from_millimeters(*dimensions) == Box(2.5, 9.321, 0.1)

    @pytest.mark.parametrize("dimensions", [(0, 1, 1), (1, 1, 10001), (-5, 1, 1)])
    def test_from_millimeters_out_of_range(self, dimensions) -> None:
        with pytest.raises(DimensionOutOfRangeError):
            Box.from_millimeters(*dimensions)


class TestSequenceAccess:
    """Tests for indexing and iteration."""

    def test_indexer(self) -> None:
        box = Box(1, 2.1, 3.231)
        assert box[0] == box.a
        assert box[1] == box.b
        assert box[2] == box.c

    @pytest.mark.parametrize("index", [-1, 3, 100, 1.0, "a", True])
    def test_index_out_of_range(self, index) -> None:
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            Box(1, 2, 3)[index]
        assert exc_info.value.index == index

    def test_index_error_is_index_error(self) -> None:
        with pytest.raises(IndexError):
            Box(1, 2, 3)[3]

    def test_iteration_order(self) -> None:
        box = Box(1, 2.1, 3.231)
        assert list(box) == [box.a, box.b, box.c]

    def test_iteration_is_restartable(self) -> None:
        box = Box(3, 1, 2)
        assert list(box) == list(box) == [3.0, 1.0, 2.0]

    def test_unpacking(self) -> None:
        a, b, c = Box(1, 2, 3)
        assert (a, b, c) == (1.0, 2.0, 3.0)

    def test_length(self) -> None:
        assert len(Box()) == 3
