[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "tlpifileio"
version = "0.1.0"
description = "Small file I/O tools: copying, seeking and non-blocking reads on raw file descriptors"
requires-python = ">=3.10"
dependencies = []
keywords = ["file", "io", "posix", "lseek", "non-blocking", "file-descriptor"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tlpi-copy = "tlpifileio.copy:main"
tlpi-seek-io = "tlpifileio.seek_io:main"
tlpi-nonblock = "tlpifileio.nonblock:main"

[tool.setuptools.packages.find]
include = ["tlpifileio*"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
