"""Decay Vesting Examples.

Run each example with:
    python examples/basic_usage.py

Requires:
    - pip install decay-vesting
"""
