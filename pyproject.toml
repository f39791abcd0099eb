[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yewchat"
version = "0.1.0"
description = "A terminal WebSocket chat client with user registration, a live user list and message history"
requires-python = ">=3.10"
dependencies = [
    "websockets",
]
keywords = ["chat", "websocket", "messaging", "client"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
yewchat = "yewchat.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yewchat"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
