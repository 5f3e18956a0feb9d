#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# conftest.py

import example_maps
import pytest

# Test fixtures from example maps
# =============================================================================


@pytest.fixture()
def points():
    return example_maps.points()


@pytest.fixture()
def empty_points():
    return example_maps.empty_points()


@pytest.fixture()
def uninitialized():
    return example_maps.Uninitialized()
