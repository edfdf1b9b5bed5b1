from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="simplepush",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "requests>=2.31.0",
    ],
    python_requires=">=3.10",
    entry_points={
        "console_scripts": [
            "simplepush=simplepush.main:main",
        ],
    },
    description="Send notifications through simplepush.io, optionally end-to-end encrypted",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
