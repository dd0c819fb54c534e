[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "photoprod"
version = "0.1.0"
description = "Photoproduction phenomenology tools: nucleon structure functions, helicity bookkeeping, Lorentz tensors, experimental data sets, plotting helpers and chi-squared functions"
requires-python = ">=3.10"
keywords = [
    "physics",
    "hadron physics",
    "photoproduction",
    "structure functions",
    "cross sections",
    "chi-squared",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
photoprod-figures = "photoprod.figures:main"

[tool.hatch.build.targets.wheel]
packages = ["photoprod"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
