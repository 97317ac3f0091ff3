import os
from setuptools import setup, find_packages

# Utility function to read the README file.
def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
        name = "fpgaarch",
        version = read("VERSION").strip(),
        description = "Parser for VPR-style FPGA architecture descriptions",
        packages = find_packages(exclude=["tests"]),
        include_package_data = True,
        long_description = read("README.md"),
        long_description_content_type = "text/markdown",
        classifiers = [
            "Development Status :: 3 - Alpha",
            "Programming Language :: Python :: 3.8",
            "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
            ],
        python_requires = ">=3.8",
        install_requires = ["jinja2", "lxml", "networkx"],
        extras_require = {"test": ["pytest"]},
        tests_require = ["pytest"],
        )
