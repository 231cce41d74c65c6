import re
from configparser import ConfigParser
from pathlib import Path

from setuptools import setup


with open("README.md", "r") as fd:
    long_description = fd.read()


def get_dependencies(section: str = "packages"):
    pipfile = ConfigParser()
    assert pipfile.read("Pipfile"), "Could not read Pipfile"
    return list(pipfile[section])


def get_version(package: str):
    init = (Path(package) / "__init__.py").read_text()
    return re.search(r'__version__ = "([^"]+)"', init).group(1)


setup(
    name="share-1password",
    version=get_version("share1password"),
    author="Dorian Jaminais",
    author_email="sharedvault@jaminais.fr",
    description="Send text from stdin to 1Password as a Secure Note and copy a "
    "time-limited share link to the clipboard.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/nanassito/share-1password",
    packages=["share1password"],
    entry_points={"console_scripts": ["share-1password=share1password.cli:main"]},
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: Public Domain",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=get_dependencies(),
    extras_require={"test": get_dependencies("dev-packages")},
)
