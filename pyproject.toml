[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fltlib"
version = "1.5.0"
description = "Butterworth and Chebyshev IIR filters, rectifiers and resampling for sampled signals"
requires-python = ">=3.10"
dependencies = []
keywords = ["filter", "iir", "butterworth", "chebyshev", "signal-processing", "dsp"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fltlib-demo = "fltlib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fltlib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
