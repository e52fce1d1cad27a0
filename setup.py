from setuptools import setup, find_packages

setup(
    name="recipe-dedup",
    version="1.0.0",
    description="Fuzzy near-duplicate detection for recipe collections",
    author="recipe-dedup contributors",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rapidfuzz>=3.0.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    entry_points={
        "console_scripts": [
            "recipe-dedup=recipe_dedup.cli:main",
        ],
    },
    python_requires=">=3.9",
)
