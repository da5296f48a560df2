#!/usr/bin/python
# -*- encoding: utf-8 -*-
import ast
import re

from setuptools import find_packages
from setuptools import setup

## The version number is kept in one place only, as
## periodcodec.__version__
_version_re = re.compile(r"__version__\s+=\s+(.*)")
with open("periodcodec/__init__.py", "rb") as f:
    version = str(
        ast.literal_eval(_version_re.search(f.read().decode("utf-8")).group(1))
    )

if __name__ == "__main__":
    test_packages = [
        "pytest",
        "pytest-coverage",
        "coverage",
        "tzdata",
    ]

    setup(
        name="periodcodec",
        version=version,
        description="Period list (FREEBUSY) codec for iCalendar, xCal and jCal",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        classifiers=[
            "Development Status :: 3 - Alpha",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: Apache Software License",
            "Operating System :: OS Independent",
            "Programming Language :: Python",
            "Programming Language :: Python :: 3",
            "Topic :: Office/Business :: Scheduling",
            "Topic :: Software Development :: Libraries " ":: Python Modules",
        ],
        keywords="icalendar xcal jcal freebusy period",
        license="Apache-2.0",
        python_requires=">=3.9",
        packages=find_packages(exclude=["tests", "tests.*"]),
        include_package_data=True,
        zip_safe=False,
        install_requires=[
            "lxml",
            "icalendar>=6.0",
            "tzlocal",
            "typing_extensions",
        ],
        extras_require={
            "test": test_packages,
        },
    )
