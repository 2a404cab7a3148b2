[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chartmigrate"
version = "0.1.0"
description = "Convert kube-starrocks chart values.yaml files between the flat and the operator/starrocks layouts, and link PR numbers in changelogs"
requires-python = ">=3.10"
dependencies = ["pyyaml"]
keywords = ["helm", "values.yaml", "kubernetes", "starrocks", "migration", "changelog"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
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
migrate-chart-value = "chartmigrate.migrate:main"
changelog-pr-links = "chartmigrate.changelog_links:main"

[tool.hatch.build.targets.wheel]
packages = ["chartmigrate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
