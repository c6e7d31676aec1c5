import argparse
import sys
from functools import reduce
from typing import List, Optional

from pyfwjs.fwjs import Fwjs
from pyfwjs.samples import SAMPLES
from pyfwjs.utilities.configuration import Debug
from pyfwjs.utilities.error import FwjsExit


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyfwjs",
        description="Evaluator for FWJS, a featherweight JavaScript",
        allow_abbrev=False
    )
    parser.add_argument(
        "samples",
        metavar="SAMPLE",
        nargs="*",
        help="sample programs to evaluate, in order (default: declare)"
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="list the available sample programs and exit"
    )
    parser.add_argument(
        "--dbg",
        choices=tuple(option.name for option in Debug),
        default=list(),
        action="append",
        help="pyfwjs debugging options, multiple --dbg arguments can be passed"
    )
    parser.add_argument(
        "--recursion-limit",
        metavar="N",
        type=int,
        default=None,
        help="raise the host recursion limit for deeply nested programs"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list:
        for name, sample in SAMPLES.items():
            print(f"{name:<16}{sample.source}")
        return 0
    for name in args.samples:
        if name not in SAMPLES:
            parser.error(f"unknown sample '{name}' (see --list)")
    if args.recursion_limit is not None:
        sys.setrecursionlimit(args.recursion_limit)

    fwjs = Fwjs(reduce(lambda a, b: a | Debug[b], args.dbg, Debug(0)))  # Collapse all flags passed.
    for name in args.samples or ["declare"]:
        sample = SAMPLES[name]
        fwjs.reinitialize_environment()
        try:
            value = fwjs.run(sample.program)
        except FwjsExit as exit_:
            if exit_.code:
                return exit_.code
            continue
        print(f"'{sample.source}' evaluates to {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
