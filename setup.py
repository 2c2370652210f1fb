# type: ignore
import ast
import re

import setuptools

_version_re = re.compile(r"__version__\s+=\s+(.*)")
with open("lavacharts/__init__.py", "rb") as f:
    _match = _version_re.search(f.read().decode("utf-8"))
    if _match is None:
        print("No version found")
        raise SystemExit(1)
    version = str(ast.literal_eval(_match.group(1)))


with open("requirements.txt", "r") as f:
    install_requires = [
        line.strip().replace("==", ">=") for line in f.readlines() if line.strip()
    ]

with open("requirements-test.txt", "r") as f:
    tests_require = [line.strip() for line in f.readlines() if line.strip()]

setuptools.setup(
    name="pylavacharts",
    version=version,
    url="",
    author="",
    author_email="",
    description="Validated Google Charts configuration objects, serialized to JSON.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=[
            "dist",
            "build",
            "*.tests",
            "*.tests.*",
            "tests.*",
            "tests",
            "docs",
            ".github",
            "",
        ]
    ),
    python_requires=">=3.11",
    install_requires=install_requires,
    extras_require={
        "test": tests_require,
    },
    entry_points={
        "console_scripts": ["lavacharts=lavacharts.scripts.lavacharts:cli"],
    },
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
