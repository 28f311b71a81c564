"""Setup configuration for Todo Explorer package."""

from setuptools import setup, find_packages

setup(
    name="todo-explorer",
    version="1.0.0",
    description="URL-synchronized filters and pagination for a todo console and API",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.11",
    install_requires=[
        "duckdb>=1.0.0",
        "pandas>=2.1.0",
        "numpy>=1.26.0",
        "streamlit>=1.35.0",
        "fastapi>=0.110.0",
        "uvicorn>=0.27.0",
        "pydantic>=2.5.0",
        "pydantic-settings>=2.1.0",
        "httpx>=0.26.0",
        "python-dotenv>=1.0.0",
        "tenacity>=8.2.0",
    ],
    extras_require={
        "dev": [
            "pytest>=8.0.0",
            "pytest-cov>=4.1.0",
            "black>=24.1.0",
            "ruff>=0.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "todo-seed=todo_explorer.mock.seed:main",
            "todo-mock-db=todo_explorer.mock.generators:main",
        ],
    },
)
