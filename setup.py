"""
Setup script for the bingo-referee package.

Installs the round logic (``bingo_referee``) from the src/ layout and the
``bingo-referee`` console script for local demo rounds.
"""

from setuptools import setup, find_packages

setup(
    name="bingo-referee",
    version="1.0.0",
    description="Authoritative game logic for a multiplayer bingo round",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
        "APScheduler>=3.10,<4",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bingo-referee=bingo_referee.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
