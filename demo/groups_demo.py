#!/usr/bin/env python3
"""
Demo of group generators, collectors and the ready-made generators.

Debug logging is switched on for the subexport loggers so the group
expansion and installation steps are visible.
"""

import logging

from subexport import (
    CollectionValidationError,
    build_exporter,
    curry_method,
    like,
    merge_defaults,
)

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
logging.getLogger("subexport").setLevel(logging.DEBUG)


class Counter:
    """Exports a pair of routines sharing one private count."""

    @classmethod
    def describe(cls) -> str:
        return f"{cls.__name__} exporter"

    @staticmethod
    def make_counter(requester, group, args, collection):
        state = {"count": args.get("start", 0) if isinstance(args, dict) else 0}

        def bump() -> int:
            state["count"] += 1
            return state["count"]

        def peek() -> int:
            return state["count"]

        return {"bump": bump, "peek": peek}

    @staticmethod
    def make_formatter(requester, name, args, collection):
        width = args.get("width", 10)
        fill = args.get("fill", ".")
        return lambda text: text.ljust(width, fill)

    def counter_stats(self):
        return "instance method, not selected by like()"


def main():
    exporter = build_exporter(
        {
            "exports": {
                "describe": curry_method(),
                "fmt": merge_defaults("style", Counter.make_formatter),
            },
            "groups": {
                "counter": Counter.make_counter,
                "like": like(),
            },
            "collectors": {"style": lambda value: isinstance(value, dict)},
        }
    )

    print("=== group generators and collectors ===\n")

    print("1. Group generator with shared state:")
    print("-" * 30)
    first: dict = {}
    exporter(Counter, "-counter", {"start": 10, "-prefix": "a_"}, into=first)
    first["a_bump"]()
    first["a_bump"]()
    print(f"a_peek() = {first['a_peek']()}")

    second: dict = {}
    exporter(Counter, "-counter", {"-suffix": "_b"}, into=second)
    print(f"peek_b() = {second['peek_b']()} (independent counter)")

    print("\n2. Collected defaults:")
    print("-" * 30)
    namespace: dict = {}
    exporter(
        Counter,
        "style",
        {"width": 12, "fill": "*"},
        "fmt",
        "fmt",
        {"-as": "dots", "fill": "."},
        into=namespace,
    )
    print(namespace["fmt"]("stars"))
    print(namespace["dots"]("dots"))

    print("\n3. Curried class methods and regex selection:")
    print("-" * 30)
    namespace = {}
    exporter(Counter, "describe", ":like", {"-like": "^make_", "-prefix": "raw_"}, into=namespace)
    print(namespace["describe"]())
    print(f"Selected by pattern: {sorted(k for k in namespace if k.startswith('raw_'))}")

    print("\n4. Collector validation:")
    print("-" * 30)
    try:
        exporter(Counter, "style", ["not", "a", "mapping"], "fmt", into={})
    except CollectionValidationError as e:
        print(f"Caught expected error: {e}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    main()
