[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "faultkit"
version = "0.1.1"
description = "Structured error descriptions: severities, categories, contexts and proposed fixes"
requires-python = ">=3.10"
dependencies = []
keywords = ["errors", "diagnostics", "error-context", "autocorrection", "fix-templates"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["faultkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
