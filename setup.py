#!/usr/bin/env python3
# -*- coding: utf-8 -*-
import sys
import os
from setuptools import setup, find_packages
from pathlib import Path
this_dir = Path(__file__).absolute().parent

if sys.argv[-1].startswith('publish'):
    if os.system("pip list | grep wheel"):
        print("wheel not installed.\nUse `pip install wheel`.\nExiting.")
        sys.exit()
    if os.system("pip list | grep twine"):
        print("twine not installed.\nUse `pip install twine`.\nExiting.")
        sys.exit()
    os.system("python setup.py sdist bdist_wheel")
    if sys.argv[-1] == 'publishtest':
        os.system("twine upload -r test dist/*")
    else:
        os.system("twine upload dist/*")
    sys.exit()


def read_version():
    version = {}
    exec((this_dir / "rovsim" / "version.py").read_text(), version)
    return version["__version__"]


if __name__ == "__main__":
    setup(
        name="rovsim",
        version=read_version(),
        description="Rover robot simulator driven by a line oriented "
                    "command stream",
        python_requires=">=3.8",
        packages=find_packages(include=["rovsim", "rovsim.*"]),
        install_requires=["click>=7.0"],
        extras_require={
            "test": ["pytest", "flake8"],
        },
        entry_points={
            "console_scripts": ["rovsim = rovsim.cli:rovsim"],
        },
    )
