"""Tests for equality, ordering, hashing and display."""

import pytest
from hypothesis import given, strategies as st

from vec1 import Vec1


class TestEquality:
    def test_equal_to_vec1_and_list(self):
        """Test equality against another Vec1 and against a list, both ways."""
        vec = Vec1(1, 2)
        assert vec == Vec1(1, 2)
        assert vec == [1, 2]
        assert [1, 2] == vec
        assert vec != [1, 2, 3]
        assert vec != Vec1(2, 1)

    def test_not_equal_to_tuple(self):
        """Test that, like a list, a Vec1 never equals a tuple."""
        assert Vec1(1) != (1,)
        assert not (Vec1(1) == (1,))

    def test_unhashable(self):
        """Test that a Vec1, like a list, cannot be hashed."""
        with pytest.raises(TypeError):
            hash(Vec1(1))


class TestOrdering:
    def test_ordering_against_list(self):
        """Test comparisons against lists on either side."""
        vec = Vec1(1, 2)
        assert vec < [1, 3]
        assert vec <= [1, 2]
        assert vec > [1]
        assert [0] < vec
        assert vec >= Vec1(1, 2)

    def test_ordering_against_other_types(self):
        """Test that ordering against non-lists is unsupported."""
        with pytest.raises(TypeError):
            Vec1(1) < (2,)

    @given(
        a=st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=4),
        b=st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=4),
    )
    def test_comparison_matches_lists(self, a, b):
        """For any two Vec1s, comparisons agree with their lists."""
        va, vb = Vec1.from_sequence(a), Vec1.from_sequence(b)
        assert (va == vb) == (a == b)
        assert (va < vb) == (a < b)
        assert (va <= vb) == (a <= b)
        assert (va > vb) == (a > b)
        assert (va >= vb) == (a >= b)


class TestRepr:
    def test_repr_short(self):
        """Test the repr of a short Vec1."""
        assert repr(Vec1(1, "a")) == "Vec1([1, 'a'])"

    def test_repr_elides_long(self):
        """Test that long Vec1s are elided at the default limit."""
        text = repr(Vec1.from_sequence(range(100)))
        assert text.startswith("Vec1([0, 1, 2,")
        assert text.endswith("63, ..., +36 more])")

    def test_repr_uses_subclass_name(self):
        """Test that subclasses show their own name."""

        class Path(Vec1):
            pass

        assert repr(Path("root")) == "Path(['root'])"
