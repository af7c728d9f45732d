# setup.py
from setuptools import setup, find_packages

setup(
    name="console_scout",
    version="0.1.0",
    description="Консольный диагност страниц ConsoleScout: ошибки, предупреждения и сбои сети в headless-браузере",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"console_scout.report": ["templates/*.j2"]},
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "playwright>=1.40",
        "jinja2>=3.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "aiohttp>=3.9",
        ],
    },
    entry_points={
        "console_scripts": [
            "console-scout=console_scout.cli:main",
        ],
    },
    python_requires=">=3.11",
)
