[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chatexport"
version = "0.1.0"
description = "Parse exported chat history HTML pages into messages and filter them with simple queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["chat", "export", "html", "messages", "history", "query"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: Text Processing :: Markup :: HTML",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chatexport = "chatexport.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["chatexport"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
