[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bookscan"
version = "0.1.0"
description = "Greedy heuristics for scheduling library sign-ups and book scans within a day budget"
requires-python = ">=3.10"
dependencies = []
keywords = ["optimization", "heuristics", "greedy", "scheduling", "book-scanning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookscan-c = "bookscan.solver_c:main"
bookscan-d = "bookscan.solver_d:main"
bookscan-bf = "bookscan.solver_bf:main"
bookscan-e = "bookscan.solver_e:main"

[tool.hatch.build.targets.wheel]
packages = ["bookscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
