[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "soraka"
version = "1.0.0"
description = "Backend helpers: string and time utilities, result codes, JWT tokens, validators, response bodies, key prefixes, throttling, game-client constants, champion-select automation and template-based code generation"
requires-python = ">=3.10"
keywords = [
    "jwt",
    "bcrypt",
    "validation",
    "rate-limit",
    "debounce",
    "error-codes",
    "code-generation",
    "league-client",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]
dependencies = [
    "bcrypt",
    "pyjwt",
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
soraka-tmpl = "soraka.tmpl:main"

[tool.hatch.build.targets.wheel]
packages = ["soraka"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
