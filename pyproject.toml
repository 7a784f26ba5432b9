[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tradering"
version = "0.1.0"
description = "A fixed-size trade event ring buffer in shared memory, with a manager, a publisher and a processor"
requires-python = ">=3.10"
dependencies = []
keywords = ["ring buffer", "shared memory", "trades", "producer consumer", "ipc"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: System :: Distributed Computing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tradering-manager = "tradering.manager:main"
tradering-publisher = "tradering.publisher:main"
tradering-processor = "tradering.processor:main"

[tool.hatch.build.targets.wheel]
packages = ["tradering"]

[tool.pytest.ini_options]
addopts = "-ra"
