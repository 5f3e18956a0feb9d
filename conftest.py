#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# conftest.py

import logging

import pytest

import typedmap

log = logging.getLogger("typedmap.test")

collect_ignore = ["setup.py", ".pythonrc.py"]


# Filter tests by mark
# ================================================================


def pytest_addoption(parser):
    parser.addoption(
        "--filter", action="store", help="only run tests with the given mark"
    )


def pytest_runtest_setup(item):
    filt = item.config.getoption("--filter")
    if filt:
        if filt not in item.keywords:
            pytest.skip("only running tests with the '{}' mark".format(filt))


# typedmap configuration management
# ================================================================


@pytest.fixture(scope="function")
def restore_config_afterwards():
    """Reset typedmap configuration after a test.

    Useful for doctests that can't be decorated with `config.override`.
    """
    with typedmap.config.override():
        yield


@pytest.fixture(scope="function", params=["shallow", "deep"])
def copy_strategy(request):
    """Run a test under each copy strategy."""
    with typedmap.config.override(COPY_STRATEGY=request.param):
        yield request.param
