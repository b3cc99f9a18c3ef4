from setuptools import setup, find_packages

setup(
    name="pr-approval-stats",
    version="1.0.0",
    description="Approval rates of merged pull requests across a GitHub organization",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "aiohttp>=3.9.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pr-approval-stats=pr_approval_stats.cli:main",
        ],
    },
)
