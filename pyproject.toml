[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "learnbox"
version = "0.1.0"
description = "Small networking and concurrency tools: a line searcher, HTTP servers, a thread pool and a course/teacher REST service"
requires-python = ">=3.10"
keywords = ["http", "server", "thread-pool", "grep", "rest", "flask", "asyncio"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: Flask",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Text Processing :: Filters",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "python-dotenv",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
learnbox-grep = "learnbox.grep:main"
learnbox-blog = "learnbox.blog:main"
learnbox-stats = "learnbox.stats:main"
learnbox-threads = "learnbox.concurrency:main"
learnbox-webserver = "learnbox.webserver:main"
learnbox-async-server = "learnbox.async_server:main"
learnbox-echo = "learnbox.echo:main"
learnbox-courses = "learnbox.courses.app:main"

[tool.hatch.build.targets.wheel]
packages = ["learnbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
