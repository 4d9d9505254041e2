"""Tests for Maybe (Just and Nothing)."""

import pytest
from fp_combinators import Identity, Just, Maybe, NotCallableError, Nothing
from hypothesis import given

from tests.strategies import int_functions, integers, present_values


class TestMaybeOf:
    """Tests for the Maybe.of factory."""

    def test_none_is_nothing(self):
        """Maybe.of(None) is Nothing."""
        assert Maybe.of(None).is_nothing is True
        assert isinstance(Maybe.of(None), Nothing)

    def test_value_is_just(self):
        """Maybe.of(5) is Just(5)."""
        maybe = Maybe.of(5)
        assert maybe.is_just is True
        assert maybe.emit() == 5
        assert maybe == Just(5)

    def test_falsy_values_are_just(self):
        """Only None counts as absent."""
        for value in (0, '', [], False):
            assert Maybe.of(value).is_just

    def test_nothing_input_is_nothing(self):
        """A Maybe already in the Nothing state stays Nothing."""
        assert Maybe.of(Nothing()).is_nothing

    def test_just_input_is_nested(self):
        """A Just input is wrapped again, not flattened."""
        assert Maybe.of(Just(1)) == Just(Just(1))

    def test_only_maybe_inputs_are_checked(self):
        """Other objects with an is_nothing attribute are plain values."""

        class Impostor:
            is_nothing = True

        impostor = Impostor()
        assert Maybe.of(impostor) == Just(impostor)

    def test_variants_share_factory(self):
        """Just.of and Nothing.of are Maybe.of."""
        assert Just.of(None).is_nothing
        assert Nothing.of(3) == Just(3)

    @given(present_values)
    def test_present_values_are_just(self, x):
        """Any non-None value becomes Just(x)."""
        assert Maybe.of(x).emit() == x


class TestMaybeFlags:
    """Tests for the is_just / is_nothing flags."""

    def test_just_flags(self):
        """Just is just and not nothing."""
        assert Just(1).is_just is True
        assert Just(1).is_nothing is False

    def test_nothing_flags(self):
        """Nothing is nothing and not just."""
        assert Nothing().is_just is False
        assert Nothing().is_nothing is True

    def test_flags_are_not_fields(self):
        """Only Just carries a field."""
        assert Just.__struct_fields__ == ('value',)
        assert Nothing.__struct_fields__ == ()

    def test_nothing_instances_equal(self):
        """Fresh Nothing instances compare equal."""
        assert Nothing() == Nothing()

    def test_just_not_equal_to_nothing(self):
        """Just is never equal to Nothing."""
        assert Just(None) != Nothing()

    def test_frozen(self):
        """Just instances are immutable."""
        with pytest.raises(AttributeError):
            Just(1).value = 2  # type: ignore[misc]


class TestMaybeMap:
    """Tests for map and its short-circuiting."""

    def test_just_map(self):
        """Just.map applies the function."""
        assert Just(5).map(lambda x: x + 1) == Just(6)

    def test_just_map_to_none_demotes(self):
        """A None result turns the Maybe into Nothing."""
        assert Just(5).map(lambda _: None).is_nothing

    def test_nothing_map_skips_function(self):
        """Nothing.map never calls the function."""
        calls: list[object] = []
        result = Nothing().map(calls.append)
        assert result.is_nothing
        assert calls == []

    def test_nothing_map_returns_fresh_instance(self):
        """Nothing.map returns a new Nothing."""
        nothing = Nothing()
        assert nothing.map(str) == Nothing()

    def test_short_circuit_after_demotion(self):
        """Once Nothing, later steps are skipped."""
        calls: list[int] = []

        def record(x):
            calls.append(x)
            return x

        result = Maybe.of(1).map(record).map(lambda _: None).map(record)
        assert result.is_nothing
        assert calls == [1]

    def test_map_returning_nothing_stays_nothing(self):
        """A function returning Nothing demotes like None."""
        assert Just(1).map(lambda _: Nothing()).is_nothing

    def test_map_non_callable(self):
        """map validates its argument even for Nothing."""
        with pytest.raises(NotCallableError):
            Nothing().map('x')

    def test_pipe_short_circuits(self):
        """pipe stops transforming once a step yields None."""
        result = Maybe.of({'a': {'b': 1}}).pipe(
            lambda d: d.get('a'),
            lambda d: d.get('missing'),
            lambda d: d['b'],
        )
        assert result.is_nothing

    def test_pipe_all_present(self):
        """pipe threads values through every step."""
        result = Maybe.of({'a': {'b': 1}}).pipe(lambda d: d.get('a'), lambda d: d.get('b'))
        assert result == Just(1)

    def test_or_operator(self):
        """m | f maps."""
        assert (Just(2) | (lambda x: x * 3)) == Just(6)
        assert (Nothing() | (lambda x: x * 3)) == Nothing()

    @given(integers, int_functions)
    def test_map_law(self, x, f):
        """Maybe.of(x).map(f).emit() == f(x)."""
        assert Maybe.of(x).map(f).emit() == f(x)

    @given(int_functions)
    def test_nothing_absorbs(self, f):
        """Nothing.map(f) is always Nothing."""
        assert Nothing().map(f).is_nothing


class TestMaybeChainAndEmit:
    """Tests for chain, emit, inspect."""

    def test_just_chain(self):
        """Just.chain returns the raw function result."""
        assert Just(5).chain(lambda x: x * 2) == 10

    def test_just_chain_returns_monad_as_is(self):
        """chain does not re-wrap, even into another variant."""
        assert Just(5).chain(Identity.of) == Identity(5)

    def test_nothing_chain_skips_function(self):
        """Nothing.chain returns Nothing without calling the function."""
        calls: list[object] = []
        assert Nothing().chain(calls.append) == Nothing()
        assert calls == []

    def test_nothing_emit(self):
        """Nothing has no value to emit."""
        assert Nothing().emit() is None

    def test_inspect(self):
        """inspect names the variant."""
        assert Just(5).inspect() == 'Just(5)'
        assert Nothing().inspect() == 'Nothing()'

    def test_unwrap_or(self):
        """unwrap_or falls back only for Nothing."""
        assert Just(5).unwrap_or(0) == 5
        assert Nothing().unwrap_or(0) == 0


class TestMaybeFork:
    """Tests for fork pattern-matching consumption."""

    def test_just_fork(self):
        """Just.fork calls on_just with the value."""
        assert Just(5).fork(lambda: 'n', lambda x: x * 2) == 10

    def test_nothing_fork(self):
        """Nothing.fork calls on_nothing with no arguments."""
        assert Nothing().fork(lambda: 'n', lambda x: x * 2) == 'n'

    def test_fork_ignores_other_handler(self):
        """Only the matching handler runs."""
        calls: list[str] = []
        Just(1).fork(lambda: calls.append('nothing'), lambda _: calls.append('just'))
        Nothing().fork(lambda: calls.append('nothing'), lambda _: calls.append('just'))
        assert calls == ['just', 'nothing']

    def test_fork_requires_two_handlers(self):
        """fork with one handler is an arity error."""
        with pytest.raises(TypeError):
            Just(1).fork(lambda: 'n')  # type: ignore[call-arg]

    def test_fork_non_callable(self):
        """fork rejects non-callable handlers."""
        with pytest.raises(NotCallableError) as exc_info:
            Nothing().fork('n', str)
        assert exc_info.value.operation == 'fork'

    def test_fork_does_not_change_state(self):
        """fork consumes without altering the Maybe."""
        just = Just(1)
        just.fork(lambda: None, lambda _: None)
        assert just == Just(1)
