from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="solvesquare",
    version="1.0.0",
    author="SolveSquare developers",
    description="Find the real roots of quadratic and linear equations.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    entry_points={"console_scripts": ["solvesquare = solvesquare.cli:main"]},
    tests_require=["pytest"],
    extras_require={"test": ["pytest"]},
)
