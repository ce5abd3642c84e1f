[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "krtools"
version = "0.1.0"
description = "Small text filters, a C keyword counter, a cross-referencer, a buffered file layer and a free-list allocator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "text filter",
    "cross reference",
    "word frequency",
    "keyword count",
    "rpn calculator",
    "pagination",
    "allocator",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
krtools-keywords = "krtools.keywords:main"
krtools-vargroup = "krtools.vargroup:main"
krtools-xref = "krtools.xref:main"
krtools-wordfreq = "krtools.wordfreq:main"
krtools-symtab = "krtools.symtab:main"
krtools-define = "krtools.define:main"
krtools-visible = "krtools.visible:main"
krtools-minprintf = "krtools.minprintf:main"
krtools-minscanf = "krtools.minscanf:main"
krtools-calc = "krtools.calculator:main"
krtools-compare = "krtools.compare:main"
krtools-find = "krtools.find:main"
krtools-paginate = "krtools.paginate:main"
krtools-isupper = "krtools.isupper:main"
krtools-cat = "krtools.cat:main"
krtools-fsize = "krtools.fsize:main"
krtools-stdio = "krtools.stdio:main"
krtools-alloc = "krtools.allocator:main"

[tool.hatch.build.targets.wheel]
packages = ["krtools"]

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
