from setuptools import setup, find_packages

setup(
    name="modfcheck",
    version="0.1.0",
    description="Conformance harness for the modf fractional/integer split",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=1.20.0",
        "pandas>=1.3.0"
    ],
    extras_require={
        "test": ["pytest>=7.0"]
    },
    entry_points={
        "console_scripts": ["modfcheck=modfcheck.cli:main"]
    },
    python_requires=">=3.8",
)
