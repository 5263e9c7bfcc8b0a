"""Functional primitives for lambdautils.

This module provides functional programming utilities over lists and maps.
Utilities are designed to be stateless and side-effect-free: behaviour is
passed in as plain callables and every call returns a freshly built result,
so they can be composed into larger data processing pipelines.
"""
