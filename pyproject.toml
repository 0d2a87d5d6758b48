[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stlabs"
version = "1.0.0"
description = "Small sequence, text and container exercises: insertion sorts, text reflow, priority queues, shape geometry and sequence statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "containers", "text-processing", "geometry", "statistics", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stlabs-vector = "stlabs.sorting:main"
stlabs-text = "stlabs.text:main"
stlabs-zigzag = "stlabs.zigzag:main"
stlabs-priority-queue = "stlabs.priority_queue:main"
stlabs-factorial = "stlabs.factorial:main"
stlabs-records = "stlabs.records:main"
stlabs-geometry = "stlabs.geometry:main"
stlabs-words = "stlabs.words:main"
stlabs-seqstats = "stlabs.seqstats:main"
stlabs-pi = "stlabs.pi:main"
stlabs-shapes = "stlabs.shapes:main"

[tool.hatch.build.targets.wheel]
packages = ["stlabs"]

[tool.pytest.ini_options]
addopts = "-ra"
