"""Benchmarks for Option and Either.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from sumkit import Left, Nothing, Right, Some, from_nullable


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestOptionCreation:
    """Benchmark Option creation."""

    def test_some_creation(self, benchmark):
        """Benchmark Some creation, including the None check."""
        benchmark(Some, 42)

    def test_nothing_creation(self, benchmark):
        """Benchmark Nothing creation."""
        benchmark(Nothing)

    def test_from_nullable_none(self, benchmark):
        """Benchmark from_nullable on None."""
        benchmark(from_nullable, None)


# =============================================================================
# Method call benchmarks
# =============================================================================


class TestOptionMethods:
    """Benchmark Option method calls."""

    def test_some_map(self, benchmark):
        """Benchmark Some.map."""
        some = Some(5)
        benchmark(some.map, lambda x: x * 2)

    def test_nothing_map(self, benchmark):
        """Benchmark Nothing.map."""
        benchmark(Nothing().map, lambda x: x * 2)

    def test_some_flat_map(self, benchmark):
        """Benchmark Some.flat_map."""
        some = Some(5)
        benchmark(some.flat_map, lambda x: Some(x * 2))

    def test_some_filter(self, benchmark):
        """Benchmark Some.filter."""
        some = Some(5)
        benchmark(some.filter, lambda x: x > 3)

    def test_some_unwrap_or(self, benchmark):
        """Benchmark Some.unwrap_or."""
        some = Some(5)
        benchmark(some.unwrap_or, 0)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestOptionChaining:
    """Benchmark chained Option operations."""

    def test_some_chain_3(self, benchmark):
        """Benchmark 3-step chain on Some."""
        some = Some(5)

        def chain():
            return some.map(lambda x: x + 1).filter(lambda x: x > 0).map(lambda x: x * 2)

        benchmark(chain)

    def test_nothing_chain_3(self, benchmark):
        """Benchmark 3-step chain on Nothing (short-circuit)."""
        nothing = Nothing()

        def chain():
            return nothing.map(lambda x: x + 1).filter(lambda x: x > 0).map(lambda x: x * 2)

        benchmark(chain)


class TestEither:
    """Benchmark Either operations."""

    def test_right_map(self, benchmark):
        """Benchmark Right.map."""
        right = Right(5)
        benchmark(right.map, lambda x: x * 2)

    def test_left_map(self, benchmark):
        """Benchmark Left.map (passthrough)."""
        left = Left('error')
        benchmark(left.map, lambda x: x * 2)

    def test_swap(self, benchmark):
        """Benchmark Right.swap."""
        right = Right(5)
        benchmark(right.swap)
