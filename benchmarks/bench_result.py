"""Benchmarks for Result, Try and tuples.

Run with: uv run pytest benchmarks/ --benchmark-only -v
"""

from sumkit import Err, Ok, collect, try_of, tuple_of


def _parse(text: str) -> int:
    return int(text)


# =============================================================================
# Result benchmarks
# =============================================================================


class TestResult:
    """Benchmark Result operations."""

    def test_ok_creation(self, benchmark):
        """Benchmark Ok creation."""
        benchmark(Ok, 42)

    def test_ok_map(self, benchmark):
        """Benchmark Ok.map."""
        ok = Ok(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_err_map(self, benchmark):
        """Benchmark Err.map (passthrough)."""
        err = Err('error')
        benchmark(err.map, lambda x: x * 2)

    def test_railway_chain(self, benchmark):
        """Benchmark a 3-step flat_map chain."""
        ok = Ok(' abcd ')

        def chain():
            return (
                ok.flat_map(lambda s: Ok(s.strip()))
                .flat_map(lambda s: Ok(len(s)))
                .flat_map(lambda n: Ok(n) if n % 2 == 0 else Err(n))
            )

        benchmark(chain)

    def test_collect_100(self, benchmark):
        """Benchmark collecting 100 Ok values."""
        results = [Ok(i) for i in range(100)]
        benchmark(collect, results)


# =============================================================================
# Try benchmarks
# =============================================================================


class TestTry:
    """Benchmark try_of."""

    def test_try_of_success(self, benchmark):
        """Benchmark try_of on a returning supplier."""
        benchmark(try_of, lambda: _parse('42'))

    def test_try_of_failure(self, benchmark):
        """Benchmark try_of on a raising supplier."""
        benchmark(try_of, lambda: _parse('forty-two'))


# =============================================================================
# Tuple benchmarks
# =============================================================================


class TestTuples:
    """Benchmark tuple construction and destructuring."""

    def test_tuple_of_3(self, benchmark):
        """Benchmark tuple_of with three items."""
        benchmark(tuple_of, 1, 'a', 2.0)

    def test_destructure_3(self, benchmark):
        """Benchmark positional destructuring."""
        t = tuple_of(1, 'a', 2.0)

        def unpack():
            a, b, c = t
            return a

        benchmark(unpack)
