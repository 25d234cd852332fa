from setuptools import setup, find_packages

setup(
    name="suko",
    version="0.1.0",
    description="Suko Puzzle Solver using an exhaustive candidate scan",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.21.0",
        "tqdm>=4.62.0",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "suko=suko.cli:main",
        ],
    },
)
