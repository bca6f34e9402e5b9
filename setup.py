"""log-curl-request setup file."""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="log-curl-request",
    version="1.0.0",
    author="log-curl-request Contributors",
    author_email="maintainers@example.com",
    description="Generate shell-safe cURL commands from HTTP requests for debugging and sharing",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/yourusername/log-curl-request",
    project_urls={
        "Bug Reports": "https://github.com/yourusername/log-curl-request/issues",
        "Source": "https://github.com/yourusername/log-curl-request",
    },
    packages=find_packages(exclude=["tests", "tests.*", "docs"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Topic :: Internet :: WWW/HTTP",
        "Topic :: Software Development :: Debuggers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords=[
        "curl",
        "http",
        "debugging",
        "logging",
        "httpx",
        "aiohttp",
    ],
    python_requires=">=3.9",
    install_requires=[
        "aiohttp>=3.9.0",
        "httpx>=0.25.0",
        "click>=8.1.0",
        "rich>=13.0.0",
        "pyyaml>=6.0.1",
        "structlog>=23.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.4.0",
            "pytest-cov>=4.1.0",
            "black>=23.0.0",
            "isort>=5.12.0",
            "mypy>=1.5.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "log-curl=log_curl_request.main:cli",
        ],
    },
)
