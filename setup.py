from setuptools import find_packages, setup

setup(
    name="jtops",
    version="0.1.0",
    description="jtops - secret generation and MongoDB connectivity checks for the job-tracker deployment",
    packages=find_packages(include=["jtops", "jtops.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pymongo",  # MongoDB
        "pydantic>=2",  # Config and output schemas
        "python-dotenv",  # .env loading for MONGODB_URI
        "rich",  # Terminal formatting
        "typer",  # CLI
    ],
    extras_require={
        "test": [
            "mongomock",  # In-memory MongoDB for tests
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
        "dev": [
            "ruff",  # Linting and formatting
            "mypy",  # Static type checking
        ],
    },
    entry_points={
        "console_scripts": [
            "jtops=jtops.cli:main",
            "jtops-generate-secrets=jtops.cli:generate_secrets",
            "jtops-test-db=jtops.cli:check_db",
        ],
    },
)
