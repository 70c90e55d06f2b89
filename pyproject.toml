[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primer"
version = "0.1.0"
description = "Small, self-contained command-line tools and library routines: text filters, converters, an expression evaluator, image generators and HTML utilities"
requires-python = ">=3.10"
keywords = [
    "expression-evaluator",
    "html",
    "svg",
    "gif",
    "bit-set",
    "topological-sort",
    "text-filters",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]
dependencies = [
    "html5lib",
    "requests",
    "pillow",
    "jinja2",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
primer-dup = "primer.dup:main"
primer-dup-read = "primer.dup:main_read"
primer-echo = "primer.echo:main"
primer-hello = "primer.echo:main_hello"
primer-cf = "primer.tempconv:main_cf"
primer-tempflag = "primer.tempconv:main_tempflag"
primer-basename = "primer.strutil:main_basename"
primer-comma = "primer.strutil:main_comma"
primer-netflag = "primer.netflag:main"
primer-rev = "primer.slices:main_rev"
primer-dedup = "primer.textstats:main_dedup"
primer-charcount = "primer.textstats:main_charcount"
primer-surface = "primer.surface:main"
primer-surface-server = "primer.surface:main_serve"
primer-lissajous = "primer.images:main_lissajous"
primer-mandelbrot = "primer.images:main_mandelbrot"
primer-xmlselect = "primer.xmlselect:main"
primer-toposort = "primer.graph:main_toposort"
primer-outline = "primer.outline:main"
primer-outline-url = "primer.outline:main_url"
primer-title = "primer.title:main"
primer-wait = "primer.wait:main"
primer-fetch = "primer.fetch:main"
primer-fetchall = "primer.fetch:main_all"
primer-issues = "primer.issues:main"
primer-issues-report = "primer.issues:main_report"
primer-issues-html = "primer.issues:main_html"
primer-movie = "primer.movie:main"
primer-urlvalues = "primer.urlvalues:main"
primer-bytecounter = "primer.bytecounter:main"

[tool.hatch.build.targets.wheel]
packages = ["primer"]

[tool.hatch.build.targets.sdist]
include = ["primer", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
