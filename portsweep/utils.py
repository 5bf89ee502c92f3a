import ipaddress
from typing import Union

from .errors import ConfigurationError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


def parse_address(text: str) -> IPAddress:
    """
    Parses an IPv4 or IPv6 literal. Hostnames are not resolved.
    Example: "::1" -> IPv6Address('::1')
    """
    try:
        return ipaddress.ip_address(text.strip())
    except ValueError:
        raise ConfigurationError(f"could not parse {text} as an IP address") from None
