"""
setup.py

Сборка и установка Peg Thing.

Использование:
    pip install -e .            # разработка
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="peg_thing",
    version="1.0.0",
    description="Triangular Peg Solitaire engine, console game and JSON API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    python_requires=">=3.8",
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "peg-thing=main:main",
        ],
    },
    zip_safe=False,
)
