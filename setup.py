"""Setup configuration for HOLONET."""

from setuptools import find_packages, setup

setup(
    name="holonet-demo",
    version="0.1.0",
    description="Star Wars API demo client — cached SWAPI fetches, console display, tiny HTTP server",
    python_requires=">=3.11",
    packages=find_packages(where="src", include=["holonet*"]),
    package_dir={"": "src"},
    install_requires=[
        "httpx>=0.27.0",
        "pandas>=2.2.0",
        "pydantic>=2.6.0",
        "pydantic-settings>=2.1.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.29.0",
    ],
    entry_points={
        "console_scripts": [
            "holonet=holonet.cli:cli_entry",
        ],
    },
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
            "pytest-mock>=3.12.0",
            "respx>=0.21.0",
            "python-dotenv>=1.0.0",
        ],
    },
)
