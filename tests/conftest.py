"""Shared fixtures for fill-in tests."""

import pytest

from fillin.config import FillInConfig


def func1():
    return "snails"


def func2(*args):
    return '*'.join(arg.upper() for arg in args)


def add_numbers(*args):
    return str(round(sum(float(arg) for arg in args), 4))


@pytest.fixture
def config():
    """Isolated config with the sample store and exported functions."""
    config = FillInConfig()
    config.variables.update({
        'var': 'text',
        'nestedtext': 'coconuts',
        'more_var': 'donuts',
        'var2': 'nested',
        'text\\]]': 'garbage',
    })
    config.functions.update({
        'func1': func1,
        'func2': func2,
        'add_numbers': add_numbers,
    })
    return config
