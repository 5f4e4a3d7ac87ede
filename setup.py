# setup.py
from setuptools import setup, find_packages

setup(
    name="stacknt",
    version="0.1.0",
    description="A new type of Stack programming language with functional",
    packages=find_packages(include=["stacknt", "stacknt.*"]),
    python_requires=">=3.11",
    install_requires=[
        "click>=8.2",
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["stacknt = stacknt.cli:main"],
    },
    zip_safe=False,
)
