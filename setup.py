"""Setup configuration for the belabot Twitch/BELABOX bot."""

from setuptools import setup, find_packages

setup(
    name="belabot",
    version="0.0.1",
    description="Twitch chat control for BELABOX Cloud encoders",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "prompt_toolkit>=3.0",
        "python-dotenv>=1.0",
        "jsonschema>=4.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "belabot=belabot.main:main",
        ],
    },
)
