"""Thread Safety Example - Sharing one DateTimeBundle across threads.

With thread_safe=True the bundle uses a concurrent formatter cache. Threads
that miss the cache build formatters in parallel; the first one stored is
kept and handed to everyone, so each style is built into the cache once.

WARNING: Examples use use_isolating=False for cleaner terminal output.
NEVER disable bidi isolation in production applications that support RTL languages.

Python 3.13+.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from ftldatetime import DateTimeBundle, FluentDateTime

STYLES = ("full", "long", "medium", "short")


def render_many(bundle: DateTimeBundle, value: FluentDateTime, count: int) -> list[str]:
    """Render count placeables across a thread pool."""

    def render(i: int) -> str:
        result, errors = bundle.format_call(
            "DATETIME", [value], {"dateStyle": STYLES[i % len(STYLES)]}
        )
        if errors:
            msg = f"unexpected errors: {errors}"
            raise RuntimeError(msg)
        return result

    with ThreadPoolExecutor(max_workers=8) as pool:
        return list(pool.map(render, range(count)))


def main() -> None:
    bundle = DateTimeBundle("de-DE", thread_safe=True, use_isolating=False)
    value = FluentDateTime.parse("1989-11-09 23:30")

    results = render_many(bundle, value, 200)
    print(f"Rendered {len(results)} placeables, {len(set(results))} distinct:")
    for text in sorted(set(results)):
        print(f"  {text}")

    print(f"Cache: {bundle.get_cache_stats()}")


if __name__ == "__main__":
    main()
