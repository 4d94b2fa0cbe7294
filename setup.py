from setuptools import setup, find_packages

setup(
    name = "bibxmp",
    version = "0.1.0",
    packages = find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.0",
        "loguru",
        "pydantic",
        "pypdf>=3.9",
        "PyYAML",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "bibxmp=bibxmp.cli:main",
        ],
    },
    python_requires = ">=3.9",
)
