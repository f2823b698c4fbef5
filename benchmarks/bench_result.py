"""Benchmarks comparing remote-result with the returns library.

Run with: pytest benchmarks/bench_result.py --benchmark-only -v
"""

# remote-result imports
from remote_result import Err as RErr
from remote_result import Ok as ROk
from remote_result import bind_ok, equals, fold, is_remote_result, map_ok
from remote_result import safe as r_safe

# returns library imports
from returns.result import Failure, Success
from returns.result import safe as returns_safe


# =============================================================================
# Creation benchmarks
# =============================================================================


class TestCreation:
    """Benchmark Ok/Err creation."""

    def test_remote_ok_creation(self, benchmark):
        benchmark(ROk, 42)

    def test_returns_success_creation(self, benchmark):
        benchmark(Success, 42)

    def test_remote_err_creation(self, benchmark):
        benchmark(RErr, 'error')

    def test_returns_failure_creation(self, benchmark):
        benchmark(Failure, 'error')


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark module-level combinators against returns methods."""

    def test_remote_map_ok(self, benchmark):
        ok = ROk(5)
        benchmark(map_ok, ok, lambda x: x * 2)

    def test_remote_map_method(self, benchmark):
        ok = ROk(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_returns_map(self, benchmark):
        ok = Success(5)
        benchmark(ok.map, lambda x: x * 2)

    def test_remote_bind_ok(self, benchmark):
        ok = ROk(5)
        benchmark(bind_ok, ok, lambda x: ROk(x * 2))

    def test_returns_bind(self, benchmark):
        ok = Success(5)
        benchmark(ok.bind, lambda x: Success(x * 2))

    def test_remote_fold(self, benchmark):
        err = RErr('e')
        benchmark(fold, err, str, str)


# =============================================================================
# Chaining benchmarks
# =============================================================================


class TestChaining:
    """Benchmark chained operations."""

    def test_remote_chain_10(self, benchmark):
        def chain():
            r = ROk(0)
            for i in range(10):
                r = map_ok(r, lambda x, i=i: x + i)
            return r

        benchmark(chain)

    def test_returns_chain_10(self, benchmark):
        def chain():
            r = Success(0)
            for i in range(10):
                r = r.map(lambda x, i=i: x + i)
            return r

        benchmark(chain)


# =============================================================================
# Safe decorator benchmarks
# =============================================================================


class TestSafeDecorator:
    """Benchmark @safe decorator."""

    def test_remote_safe_success(self, benchmark):
        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_returns_safe_success(self, benchmark):
        @returns_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 2)

    def test_remote_safe_failure(self, benchmark):
        @r_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)

    def test_returns_safe_failure(self, benchmark):
        @returns_safe
        def divide(a: int, b: int) -> float:
            return a / b

        benchmark(divide, 10, 0)


# =============================================================================
# Guard and equality benchmarks
# =============================================================================


class TestGuards:
    """Benchmark guards on instances and decoded records."""

    def test_guard_instance(self, benchmark):
        benchmark(is_remote_result, ROk(1))

    def test_guard_record(self, benchmark):
        benchmark(is_remote_result, {'type': 'err', 'error': 'e'})

    def test_guard_malformed(self, benchmark):
        benchmark(is_remote_result, {'kind': 'ok'})

    def test_equals(self, benchmark):
        benchmark(equals, ROk(1), ROk(1))
