[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtpstack"
version = "0.1.0"
description = "Building blocks of an RTP stack: payload types, the A/V profile, fmtp parsing, jitter control, base64 and sliding extremum tracking"
requires-python = ">=3.10"
dependencies = []
keywords = ["rtp", "voip", "sdp", "fmtp", "rtpmap", "jitter", "codec", "base64"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Internet Phone",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rtpstack-fmtpparse = "rtpstack.fmtpparse:main"

[tool.hatch.build.targets.wheel]
packages = ["rtpstack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
