"""Test package for the movie comments API

Shared test utilities live beside the tests (see fake_motor).
"""
