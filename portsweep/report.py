from typing import Iterable


def render_report(ports: Iterable[int]) -> str:
    """
    Renders open ports ascending, one "<port> is open" line each.
    The leading newline terminates the line of progress dots, so an
    empty scan still produces a single blank line.
    """
    lines = [f"{port} is open\n" for port in sorted(ports)]
    return "\n" + "".join(lines)
