"""Setup script for Epoch Breeder"""

from setuptools import find_packages, setup

with open("requirements.txt") as f:
    requirements = [
        line.strip() for line in f if line.strip() and not line.startswith("#")
    ]

setup(
    name="epoch-breeder",
    version="0.1.0",
    description="Generational selection and breeding step for evolutionary search",
    packages=find_packages(exclude=["tests*"]),
    python_requires=">=3.9",
    install_requires=requirements,
    extras_require={
        "dev": ["pytest", "pytest-mock", "psutil", "black", "isort", "mypy"],
    },
)
