"""
autofeedback/_selftest.py

Manual sanity checks for annotation parsing and dispatch.
Run directly with: python3 -m autofeedback._selftest

No I/O beyond printing to stdout.
No persistence. No runtime wiring.
"""

from __future__ import annotations

from typing import List

from autofeedback.diagnostics import CollectingReporter
from autofeedback.dispatcher import parse_and_execute


def _print_case(title: str, subject: str, annotation: str, expected: List[bool]) -> None:
    print("\n" + "=" * 72)
    print(title)
    print("=" * 72)
    print(f"Subject:    {subject!r}")
    print(f"Annotation: {annotation!r}")

    reporter = CollectingReporter()
    results = parse_and_execute(subject, annotation, reporter=reporter)

    print("\nResults:")
    for r in results:
        print(f"- {r.message}")

    print("\nDiagnostics:")
    for d in reporter.diagnostics:
        print(f"- [{d.kind.value}] {d.message}")

    got = [r.is_valid for r in results]
    assert got == expected, f"Violation: expected {expected}, got {got}"

    print("\n✅ PASS")


def main() -> None:
    _print_case("CASE 1: equal value is not different", "1", "!=:1", [False])
    _print_case("CASE 2: different value", "1", "!=:2", [True])
    _print_case("CASE 3: chained validators", "x", "!=:2:!=:3", [True, True])
    _print_case("CASE 4: unknown leading operator", "x", "foo:2", [])
    _print_case("CASE 5: too many parameters", "x", "!=:1:2", [])
    _print_case("CASE 6: trailing group missing its parameter", "x", "!=:1:!=:", [True])

    print("\n" + "=" * 72)
    print("ALL SELFTEST CASES PASSED ✅")
    print("=" * 72)


if __name__ == "__main__":
    main()
