#!/usr/bin/env python3
"""
portsweep - concurrent TCP connect scanner

Probes every TCP port (1-65535) of one IPv4 or IPv6 address using N
concurrent workers and lists the open ones.

Usage:
    python scan.py 127.0.0.1
    python scan.py -j 64 ::1
"""

from portsweep.main import run

if __name__ == "__main__":
    run()
