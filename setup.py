from setuptools import setup

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="fenwick-tree",
    description=("A Fenwick tree (binary indexed tree) over an arbitrary"
                 + " integer index range"),
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=['fenwick'],
    version='0.1',
    python_requires=">=3.7",
    install_requires=[
        "loguru",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: MIT License",
    ])
