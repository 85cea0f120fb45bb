# setup.py
from setuptools import setup, find_packages

setup(
    name="jisp",
    version="0.1.0",
    description="A small Lisp interpreter: tokenizer, parser and tree-walking evaluator",
    packages=find_packages(include=["jisp", "jisp.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
