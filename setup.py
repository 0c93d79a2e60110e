from pathlib import Path

from setuptools import find_packages, setup


with Path("requirements.txt").open() as requirements_file:
    install_requires = [line.strip() for line in requirements_file if line.strip() and not line.startswith("#")]

setup(
    name="rsvp_bridge",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        "test": ["pytest>=8.0", "httpx>=0.27"],
    },
    entry_points={
        "console_scripts": ["rsvp-bridge=rsvp_bridge.main:main"],
    },
    python_requires=">=3.11",
)
