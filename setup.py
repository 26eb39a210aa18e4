#! /usr/bin/env python

import os
import re
from setuptools import setup

here = os.path.abspath(os.path.dirname(__file__))

def read_meta(name):
    with open(os.path.join(here, "pychebops.py")) as f:
        return re.search(r'^__%s__ = "(.*)"' % name, f.read(), re.M).group(1)

setup(
    name="pychebops",
    version=read_meta("version"),
    description="Delta function inner products, spherefun symmetry projection and chebtech restriction",
    author=read_meta("author"),
    author_email="alexalemi@gmail.com",
    py_modules=["pychebops", "chebtools", "trigtools", "fun", "chebtech",
                "trigtech", "deltafun", "spherefun"],
    install_requires=["numpy", "scipy"],
    extras_require={"test": ["pytest"]},
    license="ISCL",
)
