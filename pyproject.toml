[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fastqinfo"
version = "0.1.0"
description = "Summarize FASTQ sequencing files: record count and read length range."
requires-python = ">=3.10"
dependencies = []
keywords = ["fastq", "bioinformatics", "sequencing", "genomics", "reads"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fastq-info = "fastqinfo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fastqinfo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
