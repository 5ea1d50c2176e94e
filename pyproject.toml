[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smftools"
version = "0.1.0"
description = "Command-line tools and helpers for inspecting and converting Standard MIDI files"
requires-python = ">=3.10"
dependencies = [
    "mido",
]
keywords = ["midi", "smf", "chords", "base64", "binasc", "svg", "staff"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: MIDI",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mid2mtb = "smftools.mtb:main"
midi2base64 = "smftools.b64:main"
midi2binasc = "smftools.binasc:main"
midi2chords = "smftools.chords:main"

[tool.hatch.build.targets.wheel]
packages = ["smftools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
