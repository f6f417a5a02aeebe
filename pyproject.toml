[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jtbody"
version = "0.1.0"
description = "Parse and encode message bodies of the JT/T 808 and JT/T 1078 vehicle terminal protocols"
requires-python = ">=3.10"
dependencies = []
keywords = ["jt808", "jt1078", "telematics", "vehicle", "gnss", "protocol", "binary"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["jtbody"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
