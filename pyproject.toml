[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rdapkit"
version = "0.1.0"
description = "RDAP bootstrap client: find the RDAP servers for domains, IP addresses, AS numbers and entity handles"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["rdap", "bootstrap", "whois", "dns", "asn", "iana", "registry"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["rdapkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
