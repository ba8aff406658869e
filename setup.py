from setuptools import find_packages, setup

setup(
    name="hofkit",
    version="0.1.0",
    description="Higher-order functions for sequences: for_each, filter_seq, map_seq, bind_args, cycle_args, join_fns",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
)
