"""Tests for kind classification and same-value equality."""
import datetime
import re
import pytest
import numpy as np
from proptypes import MISSING, Symbol, coarse_kind, precise_kind, same_value
from proptypes.validation.kinds import lookup, own_keys, postfix_for_type_warning


class FakeSymbol:
    """Symbol-like value tagged through its class."""
    __to_string_tag__ = 'Symbol'


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class TestCoarseKind:
    """Tests for coarse classification."""

    @pytest.mark.parametrize('value, kind', [
        ([1, 2], 'array'),
        ((1, 2), 'array'),
        (range(3), 'array'),
        (np.array([1.0, 2.0]), 'array'),
        (np.array(5), 'number'),
        (np.array(True), 'boolean'),
        (True, 'boolean'),
        (np.bool_(False), 'boolean'),
        (1, 'number'),
        (1.5, 'number'),
        (2 + 1j, 'number'),
        (np.float32(1.0), 'number'),
        (np.int64(3), 'number'),
        ('text', 'string'),
        (Symbol('token'), 'symbol'),
        (FakeSymbol(), 'symbol'),
        (re.compile('a+'), 'object'),
        (len, 'function'),
        (lambda: None, 'function'),
        (Point, 'function'),
        ({'a': 1}, 'object'),
        (Point(1, 2), 'object'),
        (datetime.date(2020, 1, 1), 'object'),
        (None, 'object'),
        (MISSING, 'undefined'),
    ])
    def test_classification(self, value, kind):
        """Test coarse kind of common values."""
        assert coarse_kind(value) == kind


class TestPreciseKind:
    """Tests for precise classification."""

    @pytest.mark.parametrize('value, kind', [
        (None, 'null'),
        (MISSING, 'undefined'),
        (datetime.date(2020, 1, 1), 'date'),
        (datetime.datetime(2020, 1, 1, 12, 0), 'date'),
        (np.datetime64('2020-01-01'), 'date'),
        (re.compile('a+'), 'regexp'),
        ({'a': 1}, 'object'),
        ([1], 'array'),
        ('x', 'string'),
    ])
    def test_classification(self, value, kind):
        """Test precise kind refines object and renders absent values."""
        assert precise_kind(value) == kind

    def test_postfix_for_type_warning(self):
        """Test article selection for warning messages."""
        assert postfix_for_type_warning([]) == 'an array'
        assert postfix_for_type_warning({}) == 'an object'
        assert postfix_for_type_warning(True) == 'a boolean'
        assert postfix_for_type_warning(5) == 'number'
        assert postfix_for_type_warning(None) == 'null'


class TestSameValue:
    """Tests for same-value equality."""

    def test_nan_equals_nan(self):
        """Test NaN is equal to itself."""
        assert same_value(float('nan'), float('nan'))
        assert same_value(np.float64('nan'), float('nan'))

    def test_signed_zero_distinct(self):
        """Test +0 and -0 are different."""
        assert not same_value(0.0, -0.0)
        assert not same_value(0, -0.0)
        assert same_value(-0.0, -0.0)
        assert same_value(0, 0.0)

    def test_numbers_by_value(self):
        """Test numbers compare by value across numeric types."""
        assert same_value(1, 1.0)
        assert same_value(np.int64(7), 7)
        assert not same_value(1, 2)

    def test_no_cross_kind_coercion(self):
        """Test booleans never match numbers."""
        assert not same_value(True, 1)
        assert not same_value(0, False)
        assert same_value(True, True)

    def test_strings_by_value(self):
        """Test strings compare by value."""
        assert same_value('abc', ''.join(['a', 'bc']))
        assert not same_value('abc', 'abd')

    def test_identity_for_containers_and_symbols(self):
        """Test arrays, objects and symbols compare by identity."""
        items = [1, 2]
        token = Symbol('a')
        assert same_value(items, items)
        assert not same_value([1, 2], [1, 2])
        assert not same_value({'a': 1}, {'a': 1})
        assert same_value(token, token)
        assert not same_value(Symbol('a'), Symbol('a'))


class TestLookup:
    """Tests for reading values out of containers."""

    def test_mapping(self):
        """Test mapping lookup and missing keys."""
        assert lookup({'a': 1}, 'a') == 1
        assert lookup({'a': None}, 'a') is None
        assert lookup({}, 'a') is MISSING

    def test_sequence(self):
        """Test sequence lookup by index."""
        assert lookup([10, 20], 1) == 20
        assert lookup([10, 20], 5) is MISSING

    def test_sequence_ignores_attribute_names(self):
        """Test string keys on sequences do not reach list methods."""
        assert lookup([1, 2], 'append') is MISSING
        assert lookup(np.array([1, 2]), 'shape') is MISSING

    def test_object_attributes(self):
        """Test attribute lookup on plain objects."""
        point = Point(1, 2)
        assert lookup(point, 'x') == 1
        assert lookup(point, 'z') is MISSING
        assert own_keys(point) == ['x', 'y']
        assert own_keys(5) == []
