"""setuptools setup for FocusTimer.

Install for development:
    pip install -e ".[test]"
    pytest
"""

from setuptools import setup, find_packages

setup(
    name="FocusTimer",
    version="0.1.0",
    description="Reusable pomodoro countdown engine built on Qt timers",
    packages=find_packages(exclude=["tests"]),
    python_requires=">=3.10",
    install_requires=["PyQt6"],
    extras_require={"test": ["pytest"]},
)
