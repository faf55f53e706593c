#!/usr/bin/env python3
"""
Quick verification test for garble

Run this test to verify the installation is working correctly.
"""

import sys
import os
from dataclasses import dataclass

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from garble import U16, garblable, garble, SimpleGarbler


@garblable
@dataclass
class Packet:
    port: U16
    payload: bytes


def test_imports():
    """Test that all public modules can be imported."""
    modules = [
        ("garble", "garble"),
        ("garble.garbler", "SimpleGarbler"),
        ("garble.capability", "Garble"),
        ("garble.numeric", "U32"),
        ("garble.derive", "garblable"),
        ("garble.utils", "get_logger"),
        ("garble.utils.config_loader", "ConfigLoader"),
    ]

    for module_name, item_name in modules:
        module = __import__(module_name, fromlist=[item_name])
        assert hasattr(module, item_name), f"{module_name}.{item_name} missing"


def test_end_to_end():
    """Test garbling a composite with a seeded garbler."""
    packet = Packet(U16(8080), b"ping")

    assert garble(packet, SimpleGarbler(0.0)) == packet

    first = garble(packet, SimpleGarbler(0.5, seed=2024))
    second = garble(packet, SimpleGarbler(0.5, seed=2024))
    assert first == second
    assert len(first.payload) == 4


def test_config_file():
    """Test that the bundled config file exists."""
    config_file = os.path.join(
        os.path.dirname(__file__), '..', 'config', 'garble.yaml'
    )
    assert os.path.exists(config_file), f"Config file not found: {config_file}"


def main():
    """Run all checks."""
    print("=" * 60)
    print("garble - Quick Verification")
    print("=" * 60)

    failed = 0
    for check in (test_imports, test_end_to_end, test_config_file):
        try:
            check()
            print(f"  ✓ {check.__name__}")
        except AssertionError as e:
            print(f"  ✗ {check.__name__}: {e}")
            failed += 1

    print("=" * 60)
    if failed == 0:
        print("✓ All checks passed!")
        return 0
    print(f"✗ {failed} check(s) failed. Please check the installation.")
    return 1


if __name__ == "__main__":
    sys.exit(main())
