[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mefs"
version = "0.1.0"
description = "Building blocks for an S3-compatible object storage client: bucket location cache, bucket notification configuration, hooked readers and size helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["s3", "object-storage", "bucket", "notification", "xml"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mefs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
