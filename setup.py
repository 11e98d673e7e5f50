"""
Setup script for the rps-referee package.

Installs the rps_referee package from src/ and the ``rps-referee``
console script.
"""

from setuptools import setup, find_packages

setup(
    name="rps-referee",
    version="1.0.0",
    description="Generalized rock-paper-scissors with a commit-reveal fair opponent",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "python-dotenv>=1.0.0",
        "tabulate>=0.9.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "rps-referee=rps_referee.cli:main",
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
