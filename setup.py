from setuptools import setup, find_packages

setup(
    name="bitconnect",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "gymnasium",  # environment adapter for learning-based search
    ],
    extras_require={
        "test": ["pytest"],
    },
)
