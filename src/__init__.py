"""manga-cli: search, download and read manga chapters from the terminal."""

__version__ = "0.1.0"
