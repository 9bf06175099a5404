[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metricfacade"
version = "0.1.0"
description = "A lightweight metrics facade: emit counters, gauges and histograms to a pluggable global recorder."
requires-python = ">=3.10"
dependencies = []
keywords = ["metrics", "telemetry", "counter", "gauge", "histogram", "instrumentation"]
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
    "Topic :: System :: Monitoring",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
metricfacade-demo = "metricfacade.printer:main"

[tool.hatch.build.targets.wheel]
packages = ["metricfacade"]

[tool.pytest.ini_options]
addopts = "-ra"
