"""
Setup script for lesson-quest.

Quest is a terminal micro-lesson engine. It serves three roles:

1. Session Builder - Shuffled lesson queues with interleaved review steps
2. Grader - Per-kind answer checking (choice, fill, order, match, select-line)
3. Mistake Loop - One remedial replay of missed steps before star scoring

The 'quest' command is the primary entry point.
"""

from setuptools import find_packages, setup

setup(
    name="lesson-quest",
    version="1.0.0",
    description="Adaptive micro-lesson engine with spaced review and mistake replay",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    author="lesson-quest",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"quest.curriculum.data": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "quest=quest.delivery.cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="learning spaced-repetition cli education lessons",
)
