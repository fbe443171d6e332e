[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mathquiz"
version = "0.1.0"
description = "An interactive multiple-choice math quiz for the terminal, with a leaderboard kept in a text file"
requires-python = ">=3.10"
dependencies = []
keywords = ["math", "quiz", "education", "leaderboard", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mathquiz = "mathquiz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mathquiz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
