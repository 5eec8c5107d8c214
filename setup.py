from setuptools import find_packages, setup

setup(
    name="kselect",
    version="0.1.0",
    description="Lazy P(n,k) and C(n,k) index generators",
    packages=find_packages(),
    python_requires=">=3.10",
    extras_require={"test": ["pytest"]},
)
