[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "curpkit"
version = "0.1.0"
description = "CURP builder for Mexican population registry codes, plus small interactive loop and arithmetic exercises"
requires-python = ">=3.10"
dependencies = []
keywords = ["curp", "mexico", "identifier", "exercises", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Spanish",
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
curpkit-curp = "curpkit.curp:main"
curpkit-loops = "curpkit.loops:main"
curpkit-exercises = "curpkit.exercises:main"

[tool.hatch.build.targets.wheel]
packages = ["curpkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
