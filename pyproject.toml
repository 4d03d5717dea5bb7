[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "system_info"
version = "1.0.0"
description = "Detect computer vendor, product family, disks, CPU and graphics hardware on Linux"
requires-python = ">=3.10"
dependencies = []
keywords = ["hardware", "sysfs", "lspci", "lsusb", "cpuid", "nvidia", "detection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["system_info"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
