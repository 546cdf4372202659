from __future__ import annotations

import sys
from collections.abc import Sequence

from suite_kernel.app import run


def main(argv: Sequence[str] | None = None) -> int:
    # Runs the reference group unless another --suite is given.
    args = list(argv) if argv is not None else sys.argv[1:]
    if "--suite" not in args:
        args = ["--suite", "demo_suite.common_suite:CommonSuite", *args]
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
