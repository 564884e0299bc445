#!/usr/bin/env python3
"""
Demo of the basic subexport workflow: declare exports, then import them
with renaming, prefixes and per-import generated routines.
"""

import logging
import types

from subexport import ExporterConfig, OutputSlot, UnknownExportError, setup_exporter

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")


def build_text_library() -> types.ModuleType:
    """Create a small module that exports text helpers."""
    library = types.ModuleType("textlib")

    def shout(text: str) -> str:
        return text.upper() + "!"

    def whisper(text: str) -> str:
        return text.lower() + "..."

    def make_repeater(requester, name, args, collection):
        times = args.get("times", 2)
        sep = args.get("sep", " ")

        def repeat(text: str) -> str:
            return sep.join([text] * times)

        return repeat

    library.shout = shout
    library.whisper = whisper

    config = ExporterConfig.build(
        exports=["shout", "whisper", "repeat", make_repeater],
        groups={"volume": ["shout", "whisper"], "default": ["shout"]},
    )
    setup_exporter(config, into=library)
    return library


def main():
    textlib = build_text_library()
    namespace: dict = {}

    print("=== subexport demo ===\n")

    print("1. Default import:")
    print("-" * 30)
    textlib.import_(into=namespace)
    print(f"Imported: {sorted(namespace)}")
    print(namespace["shout"]("hello"))

    print("\n2. Renaming and prefixing:")
    print("-" * 30)
    namespace.clear()
    textlib.import_("whisper", {"-as": "quietly"}, "-volume", {"-prefix": "v_"}, into=namespace)
    print(f"Imported: {sorted(namespace)}")
    print(namespace["quietly"]("HELLO"))

    print("\n3. Generated routines:")
    print("-" * 30)
    namespace.clear()
    textlib.import_(
        "repeat",
        {"-as": "twice"},
        "repeat",
        {"-as": "thrice", "times": 3, "sep": "-"},
        into=namespace,
    )
    print(namespace["twice"]("ho"))
    print(namespace["thrice"]("ho"))

    print("\n4. Output slots and exclusions:")
    print("-" * 30)
    slot = OutputSlot()
    namespace.clear()
    textlib.import_(":all", "!repeat", "shout", {"-as": slot}, into=namespace)
    print(f"Imported: {sorted(namespace)}")
    print(f"Slot holds: {slot.value('slot')}")

    print("\n5. Errors:")
    print("-" * 30)
    try:
        textlib.import_("mumble", into=namespace)
    except UnknownExportError as e:
        print(f"Caught expected error: {e}")

    print("\nDemo completed successfully!")


if __name__ == "__main__":
    main()
