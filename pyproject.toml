[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "baht_planner"
version = "0.1.0"
description = "Personal finance planning calculators: retirement, loans, DCA, savings goals, debt, liquidity ratios and income tax"
requires-python = ">=3.10"
dependencies = []
keywords = ["finance", "retirement", "savings", "loan", "dca", "tax", "baht"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
baht-planner = "baht_planner.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["baht_planner"]

[tool.pytest.ini_options]
addopts = "-ra"
