[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "keuangan"
version = "0.1.0"
description = "Terminal app for recording a student's budget items and income/spending transactions"
requires-python = ">=3.10"
dependencies = []
keywords = ["budget", "finance", "anggaran", "transaksi", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
keuangan = "keuangan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["keuangan"]

[tool.pytest.ini_options]
addopts = "-ra"
