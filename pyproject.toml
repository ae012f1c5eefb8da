[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "feynterm"
version = "0.1.0"
description = "Keyword-based answer grading from typed text, text files or PDFs, with template-matching OCR"
requires-python = ">=3.10"
keywords = ["grading", "ocr", "education", "answer-checking", "template-matching"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
feynterm = "feynterm.cli:main"
feynterm-grade = "feynterm.grader_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["feynterm"]

[tool.pytest.ini_options]
addopts = "-ra"
