#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# setup.py

# Use a consistent encoding
from codecs import open

from setuptools import find_packages, setup

with open("README.md", encoding="utf-8") as f:
    readme = f.read()

about = {}
with open("./typedmap/__about__.py", encoding="utf-8") as f:
    exec(f.read(), about)

install_requires = [
    "ordered-set >=4.0.2",
    "pyyaml >=3.13",
    "toolz >=0.9.0",
]

test_requires = [
    "hypothesis >=6.0.0",
    "pytest >=7.0.0",
]

setup(
    name=about["__title__"],
    version=about["__version__"],
    description=about["__description__"],
    author=about["__author__"],
    author_email=about["__author_email__"],
    url=about["__url__"],
    license=about["__license__"],
    long_description=readme,
    long_description_content_type="text/markdown",
    install_requires=install_requires,
    extras_require={"test": test_requires},
    python_requires=">=3.8",
    keywords="immutable map typed collection value-object domain-model",
    packages=find_packages(exclude=["docs", "test"]),
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
