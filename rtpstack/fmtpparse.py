"""Command that extracts one parameter from an fmtp line."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from rtpstack.payloadtype import fmtp_get_value

_MAX_VALUE_LENGTH = 255


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the value of a parameter found in an fmtp line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        print("fmtpparse <fmtp-line> <param-to-extract>", file=sys.stderr)
        return 1
    value = fmtp_get_value(args[0], args[1], _MAX_VALUE_LENGTH)
    if value is not None:
        print(value)
    else:
        print("No such parameter", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())