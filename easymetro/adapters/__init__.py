"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Network building from specification text
- Route solving over a built network
"""
