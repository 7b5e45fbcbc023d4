# -*- coding: utf-8 -*-

import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="teedata",
    version="0.1.0",
    description="Data objects with magic accessors",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["teedata", "teedata.*"]),
    install_requires=[
         'sortedcontainers'
     ],
    extras_require={
         'test': ['pytest']
     },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.7',
)
