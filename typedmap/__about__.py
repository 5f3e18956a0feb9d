#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# __about__.py

"""typedmap metadata."""

__title__ = 'typedmap'
__version__ = '1.0.0'
__description__ = 'Immutable, type-constrained maps for building domain objects.'
__author__ = 'typedmap contributors'
__author_email__ = 'typedmap@users.noreply.github.com'
__copyright__ = 'Copyright 2026 typedmap contributors'
__license__ = 'MIT'
__url__ = 'https://github.com/typedmap/typedmap'

__all__ = ['__title__', '__version__', '__description__', '__author__',
           '__author_email__', '__copyright__', '__license__', '__url__']
