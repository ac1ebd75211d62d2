"""Tests for per-language formatter memoizers."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from ftldatetime.diagnostics import FormatterConstructionError
from ftldatetime.enums import DateLength
from ftldatetime.runtime.formatter import DateTimeFormatter
from ftldatetime.runtime.length import StyleBag
from ftldatetime.runtime.memoizer import (
    ConcurrentIntlLangMemoizer,
    IntlLangMemoizer,
    IntlMemoizer,
)


class Counter:
    """Constructor that records how often it ran."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, language: str, args: int) -> tuple[str, int]:
        self.calls += 1
        return (language, args)


@pytest.fixture(params=[IntlLangMemoizer, ConcurrentIntlLangMemoizer])
def memoizer(request: pytest.FixtureRequest) -> IntlLangMemoizer:
    return request.param("en-US")


class TestLangMemoizer:
    """Behavior shared by the single-threaded and concurrent memoizers."""

    def test_constructs_once_per_key(self, memoizer: IntlLangMemoizer) -> None:
        build = Counter()
        first = memoizer.try_get(build, 1)
        second = memoizer.try_get(build, 1)

        assert first == ("en-US", 1)
        assert first is second
        assert build.calls == 1
        assert (memoizer.hits, memoizer.misses) == (1, 1)

    def test_args_distinguish_entries(self, memoizer: IntlLangMemoizer) -> None:
        build = Counter()
        memoizer.try_get(build, 1)
        memoizer.try_get(build, 2)
        assert build.calls == 2
        assert len(memoizer) == 2

    def test_constructor_distinguishes_entries(self, memoizer: IntlLangMemoizer) -> None:
        memoizer.try_get(Counter(), 1)
        memoizer.try_get(Counter(), 1)
        assert len(memoizer) == 2

    def test_failures_are_not_cached(self, memoizer: IntlLangMemoizer) -> None:
        attempts: list[int] = []

        def flaky(language: str, args: int) -> str:
            attempts.append(args)
            if len(attempts) == 1:
                msg = "first attempt fails"
                raise RuntimeError(msg)
            return language

        with pytest.raises(RuntimeError):
            memoizer.try_get(flaky, 7)
        assert len(memoizer) == 0

        assert memoizer.try_get(flaky, 7) == "en-US"
        assert len(attempts) == 2

    def test_formatter_cached_per_style(self, memoizer: IntlLangMemoizer) -> None:
        bag = StyleBag(date=DateLength.LONG)
        first = memoizer.try_get(DateTimeFormatter.from_style, bag)
        again = memoizer.try_get(DateTimeFormatter.from_style, StyleBag(date=DateLength.LONG))
        assert first is again

    def test_invalid_language_retried(self) -> None:
        memoizer = IntlLangMemoizer("zz-ZZ")
        for _ in range(2):
            with pytest.raises(FormatterConstructionError):
                memoizer.try_get(DateTimeFormatter.from_style, StyleBag.empty())
        assert memoizer.misses == 2
        assert len(memoizer) == 0

    def test_clear_resets(self, memoizer: IntlLangMemoizer) -> None:
        memoizer.try_get(Counter(), 1)
        memoizer.clear()
        assert len(memoizer) == 0
        assert memoizer.get_stats() == {"language": "en-US", "size": 0, "hits": 0, "misses": 0}


class TestConcurrentMemoizer:
    """Racing constructions converge on a single retained instance."""

    def test_racing_builders_share_one_instance(self) -> None:
        workers = 8
        barrier = threading.Barrier(workers)
        built: list[object] = []
        lock = threading.Lock()

        def slow_build(language: str, args: str) -> object:
            instance = object()
            with lock:
                built.append(instance)
            barrier.wait(timeout=10)
            return instance

        memoizer = ConcurrentIntlLangMemoizer("de-DE")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda _: memoizer.try_get(slow_build, "k"), range(workers)))

        assert len(built) == workers
        assert len({id(r) for r in results}) == 1
        assert len(memoizer) == 1
        assert memoizer.try_get(slow_build, "k") is results[0]

    def test_concurrent_formatting(self) -> None:
        memoizer = ConcurrentIntlLangMemoizer("fr-FR")
        bag = StyleBag(date=DateLength.FULL)

        def lookup(_: int) -> DateTimeFormatter:
            return memoizer.try_get(DateTimeFormatter.from_style, bag)

        with ThreadPoolExecutor(max_workers=8) as pool:
            formatters = list(pool.map(lookup, range(64)))

        assert len({id(f) for f in formatters}) == 1
        assert memoizer.hits + memoizer.misses == 64


class TestIntlMemoizer:
    """Registry of per-language memoizers."""

    def test_same_language_same_memoizer(self) -> None:
        registry = IntlMemoizer()
        assert registry.get_for_lang("en-US") is registry.get_for_lang("en-US")
        assert registry.get_for_lang("en-US") is not registry.get_for_lang("fr-FR")
        assert len(registry) == 2

    def test_thread_safe_hands_out_concurrent(self) -> None:
        registry = IntlMemoizer(thread_safe=True)
        assert isinstance(registry.get_for_lang("en"), ConcurrentIntlLangMemoizer)
        assert not isinstance(IntlMemoizer().get_for_lang("en"), ConcurrentIntlLangMemoizer)
