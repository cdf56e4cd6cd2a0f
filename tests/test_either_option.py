"""Tests for the Either and Option conversion targets."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from klaw_try import Failure, Left, NoSuchElementError, Nothing, Right, Some, Success, success


class TestEither:
    """Tests for Left and Right."""

    def test_queries(self):
        """is_left()/is_right() report the side."""
        assert Right(1).is_right() is True
        assert Right(1).is_left() is False
        assert Left('e').is_left() is True
        assert Left('e').is_right() is False

    def test_get(self):
        """get() reads Right; get_left() reads Left."""
        assert Right(1).get() == 1
        assert Left('e').get_left() == 'e'
        with pytest.raises(NoSuchElementError):
            Left('e').get()
        with pytest.raises(NoSuchElementError):
            Right(1).get_left()

    def test_get_or_else(self):
        """get_or_else() falls back only on Left."""
        assert Right(1).get_or_else(0) == 1
        assert Left('e').get_or_else(0) == 0

    def test_map_and_map_left(self):
        """map() touches Right only, map_left() touches Left only."""
        assert Right(1).map(lambda x: x + 1) == Right(2)
        assert Left('e').map(lambda x: x + 1) == Left('e')
        assert Left('e').map_left(str.upper) == Left('E')
        assert Right(1).map_left(str.upper) == Right(1)

    def test_swap(self):
        """swap() exchanges sides."""
        assert Right(1).swap() == Left(1)
        assert Left(1).swap() == Right(1)

    def test_to_option_and_iter(self):
        """Right projects to Some and one item; Left to Nothing and none."""
        assert Right(1).to_option() == Some(1)
        assert Left('e').to_option() is Nothing
        assert list(Right(1)) == [1]
        assert list(Left('e')) == []

    def test_to_try(self):
        """to_try() maps Left through the given exception factory."""
        assert Right(1).to_try(ValueError) == Success(1)
        result = Left('bad input').to_try(ValueError)
        assert isinstance(result, Failure)
        assert str(result.cause) == 'bad input'

    def test_left_never_equals_right(self):
        """Left and Right holding the same value differ."""
        assert Left(1) != Right(1)

    @given(st.integers())
    def test_try_roundtrip(self, value: int):
        """success(v).to_either(m).to_try(f) == success(v)."""
        assert success(value).to_either(str).to_try(ValueError) == success(value)


class TestOption:
    """Tests for Some and Nothing."""

    def test_queries(self):
        """is_some()/is_none() report presence."""
        assert Some(1).is_some() is True
        assert Some(1).is_none() is False
        assert Nothing.is_none() is True
        assert Nothing.is_some() is False

    def test_get(self):
        """get() reads Some and raises on Nothing."""
        assert Some(None).get() is None
        with pytest.raises(NoSuchElementError, match='No value present'):
            Nothing.get()

    def test_get_or_else(self):
        """get_or_else() falls back only on Nothing."""
        assert Some(1).get_or_else(0) == 1
        assert Nothing.get_or_else(0) == 0

    def test_map_flat_map_filter(self):
        """map/flat_map/filter behave per variant."""
        assert Some(2).map(lambda x: x * 3) == Some(6)
        assert Some(2).flat_map(lambda x: Nothing) is Nothing
        assert Some(2).filter(lambda x: x > 1) == Some(2)
        assert Some(2).filter(lambda x: x > 5) is Nothing
        assert Nothing.map(lambda x: x * 3) is Nothing
        assert Nothing.flat_map(lambda x: Some(x)) is Nothing
        assert Nothing.filter(lambda x: True) is Nothing

    def test_fold(self):
        """fold() picks the branch for the variant."""
        assert Some(2).fold(lambda: 'none', str) == '2'
        assert Nothing.fold(lambda: 'none', str) == 'none'

    def test_to_try(self):
        """Some converts to Success, Nothing to Failure(NoSuchElementError)."""
        assert Some(1).to_try() == Success(1)
        result = Nothing.to_try()
        assert isinstance(result, Failure)
        assert isinstance(result.cause, NoSuchElementError)

    def test_iter(self):
        """Some yields its value, Nothing yields nothing."""
        assert list(Some(1)) == [1]
        assert list(Nothing) == []

    @given(st.integers())
    def test_try_roundtrip(self, value: int):
        """success(v).to_option().to_try() == success(v)."""
        assert success(value).to_option().to_try() == success(value)
