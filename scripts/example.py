#!/usr/bin/env python3
"""Show isinstance() checks against interfaces implemented without inheritance."""

from __future__ import annotations

import argparse
import sys
from abc import abstractmethod
from pathlib import Path

# Ensure project root is on sys.path when script is executed directly.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from nominal import Interface, implements, interface  # noqa: E402
from nominal.core.logging_config import configure_logging  # noqa: E402


@interface
class IFoo(Interface):
    @property
    @abstractmethod
    def name(self) -> str: ...


@interface
class IBar(Interface):
    @property
    @abstractmethod
    def key(self) -> int: ...


@interface
class IBaz(Interface):
    @property
    @abstractmethod
    def kind(self) -> str: ...


# Subclasses of IFoo satisfy it without tagging; IBar and IBaz are tagged.
@implements(IBar, IBaz)
class Impl(IFoo):
    name = "foo"
    key = 123
    kind = "impl"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for the run (DEBUG, INFO, ...)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    configure_logging(args.log_level)

    ins = Impl()
    for cls in (Impl, IFoo, IBar, IBaz):
        print(f"isinstance(ins, {cls.__name__}) = {isinstance(ins, cls)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
