[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dosutils"
version = "1.0.0"
description = "Small file and directory utilities: line splitting, HTML index pages, an HTML template preprocessor, FTP upload scripts and long-filename fixing."
requires-python = ">=3.10"
dependencies = []
keywords = ["preprocessor", "html", "split", "directory-listing", "ftp", "filenames"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
addlf = "dosutils.addlf:main"
fsplit = "dosutils.fsplit:main"
geoput = "dosutils.geoput:main"
htmlist = "dosutils.htmlist:main"
dirvert = "dosutils.dirvert:main"
htmlgen = "dosutils.htmlgen:main"

[tool.hatch.build.targets.wheel]
packages = ["dosutils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
