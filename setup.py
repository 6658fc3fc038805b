# setup.py
from setuptools import setup, find_packages

setup(
    name="pigment",
    version="0.1.0",
    description="A small s-expression scripting language whose programs emit paint commands",
    packages=find_packages(include=["pigment", "pigment.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["pigment=pigment.__main__:main"],
    },
    zip_safe=False,
)
