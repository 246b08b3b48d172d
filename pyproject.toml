[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vendorshop"
version = "0.1.0"
description = "A console storefront for a single vendor: profile, media and goods products, sales."
requires-python = ">=3.10"
dependencies = []
keywords = ["vendor", "store", "inventory", "point-of-sale", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vendorshop = "vendorshop.app:main"

[tool.hatch.build.targets.wheel]
packages = ["vendorshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
