"""An integer type used as a bit field of interface flags."""

import enum
import sys


class Flags(enum.IntFlag):
    """Network interface flags."""

    UP = 1
    BROADCAST = 2
    LOOPBACK = 4
    POINT_TO_POINT = 8
    MULTICAST = 16
    RUNNING = 32


def is_up(v: Flags) -> bool:
    """Report whether the interface is up."""
    return v & Flags.UP == Flags.UP


def turn_down(v: Flags) -> Flags:
    """Return ``v`` with the up flag cleared."""
    return Flags(v & ~Flags.UP)


def set_broadcast(v: Flags) -> Flags:
    """Return ``v`` with the broadcast flag set."""
    return Flags(v | Flags.BROADCAST)


def is_cast(v: Flags) -> bool:
    """Report whether the interface supports broadcast or multicast."""
    return v & (Flags.BROADCAST | Flags.MULTICAST) != 0


def _line(v: Flags, flag: bool) -> str:
    return f"{int(v):b} {str(flag).lower()}"


def main(argv: list[str] | None = None) -> int:
    """Show a flag value as it is turned down and set to broadcast."""
    v = Flags.MULTICAST | Flags.UP
    print(_line(v, is_up(v)))
    v = turn_down(v)
    print(_line(v, is_up(v)))
    v = set_broadcast(v)
    print(_line(v, is_up(v)))
    print(_line(v, is_cast(v)))
    return 0


if __name__ == "__main__":
    sys.exit(main())