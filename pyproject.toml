[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "estructuras"
version = "0.1.0"
description = "Small data-structure examples: binary search trees, stacks, queues, a word autocompletion tree and a task board"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "binary search tree", "stack", "queue", "autocomplete", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
estructuras-bst = "estructuras.bst:main"
estructuras-pilas-colas = "estructuras.stack_queue_demo:main"
estructuras-autocompletado = "estructuras.autocomplete_cli:main"
estructuras-tareas = "estructuras.tasks_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["estructuras"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
