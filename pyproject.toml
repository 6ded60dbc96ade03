[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coursekit"
version = "0.1.0"
description = "Worked course exercises and a tool that extracts exercise starter files from Markdown chapters."
requires-python = ">=3.10"
keywords = [
    "education",
    "exercises",
    "markdown",
    "luhn",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]
dependencies = [
    "markdown-it-py>=3.0",
    "requests>=2.28",
    "beautifulsoup4>=4.11",
    "websockets>=12.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "pytest-asyncio>=0.21",
    "responses>=0.23",
]

[project.scripts]
coursekit-exerciser = "coursekit.exerciser:main"
coursekit-luhn = "coursekit.luhn:main"
coursekit-transpose = "coursekit.matrix:main"
coursekit-library = "coursekit.library:main"
coursekit-gui = "coursekit.gui:main"
coursekit-ls = "coursekit.directory:main"
coursekit-philosophers = "coursekit.philosophers:main"
coursekit-linkcheck = "coursekit.linkcheck:main"
coursekit-chat-server = "coursekit.chat:server_main"
coursekit-chat-client = "coursekit.chat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["coursekit"]

[tool.hatch.build.targets.sdist]
include = ["coursekit", "tests", "README.md"]

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
ignore_missing_imports = true
