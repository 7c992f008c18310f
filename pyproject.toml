[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gymdesk"
version = "0.1.0"
description = "Console front desk for a small gym: members, courses and bookings kept in plain text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["gym", "membership", "booking", "courses", "scheduling", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Italian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gymdesk = "gymdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gymdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
