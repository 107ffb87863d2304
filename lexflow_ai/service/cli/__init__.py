"""lexflow-ai CLI (package entrypoint).

Argument parsing lives in ``cli_parser`` and handlers in ``cli_actions``;
this module only wires them together.
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 when the operation failed).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    return handle(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
