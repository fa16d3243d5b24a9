#!/usr/bin/env python3

import os
from setuptools import setup


def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()


setup(
    name="dc3lcs",
    version="0.1.0",
    license="MIT",
    description="Longest common substring length in linear time with a DC3 suffix array",
    long_description=read("README.rst"),
    packages=["dc3lcs"],
    install_requires=["click", "tqdm"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.7",
    entry_points={"console_scripts": ["dc3lcs = dc3lcs:main"]},
    classifiers=[
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: Text Processing",
        "Topic :: Utilities",
    ],
)
