#!/usr/bin/env python3
"""
catdomain: Categorical Domains

Dense integer indexing for categorical values.

Usage:
    # Build a trimmed vocabulary from a whitespace-separated token file
    python main.py vocab --input corpus.txt --min-count 2 --output vocab.json

    # Run demos
    python main.py demo --example intern

    # Run tests
    python main.py test
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Iterator, List

import numpy as np

from catdomain import (
    CategoricalObservation,
    CategoricalVariable,
    CountingDomainRegistry,
    DiffList,
    DomainScope,
    ItemizedEntity,
    StaleHandle,
    VocabularyResult,
    build_vocabulary,
    __version__,
)


def token_source(filepath: str) -> Callable[[], Iterator[str]]:
    """Return a re-readable source of whitespace-separated tokens in a file."""
    def read() -> Iterator[str]:
        with open(filepath, 'r', encoding='utf-8') as f:
            for line in f:
                yield from line.split()
    return read


def save_vocabulary_to_json(filepath: str, result: VocabularyResult) -> None:
    """Save the trimmed vocabulary and the re-indexed token stream to JSON."""
    output = {
        "vocabulary": list(result.registry.values()),
        "indices": result.indices.tolist(),
        "dropped": result.dropped,
    }

    with open(filepath, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2)


def cmd_vocab(args):
    """Execute the vocab command."""

    if args.min_count is None and args.max_size is None:
        print("Error: Must specify --min-count, --max-size, or both")
        return 1

    print(f"Loading tokens from: {args.input}")
    source = token_source(args.input)

    try:
        result = build_vocabulary(source, min_count=args.min_count, max_size=args.max_size)
    except (OSError, ValueError) as e:
        print(f"Error building vocabulary: {e}")
        return 1

    registry = result.registry
    print(f"\nVocabulary:")
    print(f"  Size: {registry.alloc_size()}")
    print(f"  Occurrences kept: {len(result.observations)}")
    print(f"  Occurrences dropped: {result.dropped}")

    counts = registry.counts()
    shown = min(args.top, registry.alloc_size())
    if shown:
        print(f"\nTop {shown} values:")
        for i in range(shown):
            print(f"  {i:>5}  {registry.get(i)!s:<20} {counts[i]}")

    if args.output:
        save_vocabulary_to_json(args.output, result)
        print(f"\nVocabulary saved to: {args.output}")

    return 0


def demo_intern():
    """Demo: interning, counting and trimming"""
    print("=" * 60)
    print("Demo: Intern, Count, Trim")
    print("=" * 60)

    registry = CountingDomainRegistry("letter")
    data = ["a", "b", "a", "c", "b", "a"]
    indices = [registry.index(v) for v in data]

    print(f"\nData:    {data}")
    print(f"Indices: {indices}")
    print(f"Counts:  {registry.counts().tolist()}")

    registry.trim_below_size(2)
    print(f"\nAfter trim_below_size(2): {list(registry.values())}")
    print(f"index('c') after trim = {registry.index('c')}")

    return indices == [0, 1, 0, 2, 1, 0] and registry.values() == ("a", "b", "c")


def demo_itemized():
    """Demo: identity-indexed entities"""
    print("=" * 60)
    print("Demo: Itemized Entities")
    print("=" * 60)

    class Person(ItemizedEntity):
        def __init__(self, name: str):
            self.name = name

        def __eq__(self, other):
            return isinstance(other, Person) and other.name == self.name

        __hash__ = object.__hash__

    scope = DomainScope()
    people = scope.domain(Person, identity=True)
    persons = [Person.create(people, "alex") for _ in range(3)]

    print("\nThree structurally equal Person('alex') entities:")
    for p in persons:
        print(f"  index={p.index}  value is self: {p.value() is p}")

    return [p.index for p in persons] == [0, 1, 2]


def demo_coordination():
    """Demo: coordinated vs. uncoordinated variables"""
    print("=" * 60)
    print("Demo: Coordinated Variables")
    print("=" * 60)

    scope = DomainScope()
    colors = scope.domain("color")
    for c in ("red", "green", "blue"):
        colors.index(c)

    seen: List[str] = []
    var = CategoricalVariable(colors, "red")
    var.subscribe(lambda v, old, new: seen.append(f"{old}->{new}"))
    bp_var = CategoricalVariable(colors, "red", coordinated=False)

    diff = DiffList()
    var.set("blue", diff)
    bp_var.set("blue", diff)
    print(f"\nAfter set('blue'): var={var.value()}, bp_var={bp_var.value()}")
    print(f"  Recorded changes: {len(diff)}  Notifications: {seen}")

    diff.undo()
    print(f"After undo: var={var.value()}, bp_var={bp_var.value()}")

    obs = CategoricalObservation(colors, "green")
    print(f"Observation: {obs!r}")

    return var.value() == "red" and bp_var.value() == "blue" and len(diff) == 1


def demo_stale():
    """Demo: stale handle detection after a trim"""
    print("=" * 60)
    print("Demo: Stale Handles")
    print("=" * 60)

    registry = CountingDomainRegistry("word")
    handles = [CategoricalObservation(registry, w) for w in ["x", "y", "y"]]
    registry.trim_below_count(2)

    try:
        handles[0].value()
    except StaleHandle as e:
        print(f"\nReading an old handle after trim: {e}")
        return True
    return False


def cmd_demo(args):
    """Execute the demo command."""
    demos = {
        "intern": demo_intern,
        "itemized": demo_itemized,
        "coordination": demo_coordination,
        "stale": demo_stale,
    }

    if args.example == "all":
        results = []
        for name, func in demos.items():
            passed = func()
            results.append((name, passed))
            print()

        print("=" * 60)
        print("Summary")
        print("=" * 60)
        all_passed = True
        for name, passed in results:
            status = "✓ PASS" if passed else "✗ FAIL"
            print(f"  {name}: {status}")
            if not passed:
                all_passed = False

        return 0 if all_passed else 1

    passed = demos[args.example]()
    return 0 if passed else 1


def cmd_test(args):
    """Execute the test command."""
    import subprocess

    test_dir = Path(__file__).parent / "tests"
    if not test_dir.exists():
        print(f"Test directory not found: {test_dir}")
        return 1

    cmd = [sys.executable, "-m", "pytest", str(test_dir)]
    if args.verbose:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=catdomain", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def cmd_info(args):
    """Display system information."""
    import scipy

    print(f"catdomain v{__version__}")
    print(f"Categorical Domains: dense integer indexing of categorical values")
    print()
    print("Registries:")
    print("  DomainRegistry          - equality- or identity-keyed interning")
    print("  CountingDomainRegistry  - interning with counts, trim_below_count/size")
    print()
    print("Python:", sys.version.split()[0])
    print("NumPy:", np.__version__)
    print("SciPy:", scipy.__version__)

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="catdomain",
        description="catdomain: Categorical Domains",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Keep tokens seen at least twice
  catdomain vocab --input corpus.txt --min-count 2 --output vocab.json

  # Keep the 1000 most frequent tokens
  catdomain vocab --input corpus.txt --max-size 1000

  # Run demos
  catdomain demo --example intern
  catdomain demo --example all

  # Run tests
  catdomain test -v
"""
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"catdomain {__version__}"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Vocab command
    vocab_parser = subparsers.add_parser("vocab", help="Build a trimmed vocabulary from a token file")
    vocab_parser.add_argument("--input", "-i", type=str, required=True, help="Whitespace-separated token file")
    vocab_parser.add_argument("--output", "-o", type=str, help="Output JSON file")
    vocab_parser.add_argument("--min-count", type=int, help="Drop tokens seen fewer times than this")
    vocab_parser.add_argument("--max-size", type=int, help="Keep at most this many tokens")
    vocab_parser.add_argument("--top", type=int, default=10, help="How many top tokens to print (default: 10)")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Run demonstration examples")
    demo_parser.add_argument(
        "--example", "-e",
        choices=["intern", "itemized", "coordination", "stale", "all"],
        default="all",
        help="Which example to run (default: all)"
    )

    # Test command
    test_parser = subparsers.add_parser("test", help="Run test suite")
    test_parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    test_parser.add_argument("--coverage", "-c", action="store_true", help="With coverage")

    # Info command
    subparsers.add_parser("info", help="Show system information")

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "vocab":
        return cmd_vocab(args)
    elif args.command == "demo":
        return cmd_demo(args)
    elif args.command == "test":
        return cmd_test(args)
    elif args.command == "info":
        return cmd_info(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
