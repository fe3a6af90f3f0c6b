# setup.py
from setuptools import setup, find_packages

setup(
    name="divlisp",
    version="0.1.0",
    packages=find_packages(include=["divlisp", "divlisp.*"]),
    package_data={"divlisp.reader": ["*.lark"]},
    install_requires=["lark>=1.1"],
    extras_require={"test": ["pytest", "hypothesis"]},
    python_requires=">=3.10",
    zip_safe=False,
)
