"""Package configuration for linear-metrics.

This file defines installation metadata and console entry points.
"""

import os

import setuptools


def _read_requirements(path):
    """Requirement lines from `path`, without comments or `-r` includes."""
    try:
        with open(path, encoding="utf-8") as f:
            return [
                line.strip()
                for line in f.read().splitlines()
                if line.strip()
                and not line.strip().startswith("#")
                and not line.strip().startswith("-r ")
            ]
    except OSError:
        return []


def main():
    """Entrypoint for invoking setuptools.setup with package metadata."""

    here = os.path.abspath(os.path.dirname(__file__))

    try:
        with open(os.path.join(here, "README.md"), encoding="utf-8") as f:
            long_description = f.read()
    except OSError:
        long_description = ""

    setuptools.setup(
        name="linear-metrics",
        version="0.1",
        description="Working-hours cycle and lead time metrics from Linear CSV exports",
        long_description=long_description,
        long_description_content_type="text/markdown",
        license="MIT",
        keywords="agile linear analytics metrics cycle-time lead-time",
        packages=setuptools.find_packages(exclude=["contrib", "docs", "tests*"]),
        install_requires=_read_requirements(os.path.join(here, "requirements-prod.txt")),
        extras_require={
            "test": _read_requirements(os.path.join(here, "requirements-dev.txt")),
        },
        python_requires=">=3.9",
        entry_points={
            "console_scripts": [
                "linear-metrics=linear_metrics.cli:main",
            ],
        },
    )


if __name__ == "__main__":
    main()
