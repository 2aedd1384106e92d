import os

from setuptools import find_namespace_packages, setup


def read_version():
    version_file_path = os.path.join(os.path.dirname(__file__), "bimap", "version.txt")
    with open(version_file_path, "r") as f:
        return f.read().strip()


setup(
    name="bimap",
    version=read_version(),
    description="A two-way map that looks up values by key and keys by value",
    python_requires=">=3.8",
    packages=find_namespace_packages(include=["bimap", "bimap.*"]),
    package_data={"bimap": ["version.txt"]},
    install_requires=["cloudpickle"],
    extras_require={"benchmark": ["psutil"], "test": ["pytest", "bidict"]},
    zip_safe=False,
)
