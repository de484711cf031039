"""
setup.py

Packaging metadata and CLI entry point for the video composer.

Version: 0.3.0 adds LLM script planning (Gemini, OpenAI, Anthropic) and the
REST API alongside the validate/compose/render CLI.
"""
from setuptools import setup, find_packages

setup(
    name="video-composer",
    version="0.3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={
        "composer.planner.prompts": ["*.yaml"],
    },
    install_requires=[
        "click",
        "pydantic>=2.0",
        "pyyaml",
        "jinja2",
        "python-dotenv",
        "fastapi",
        "uvicorn",
        "openai",
        "tiktoken",
        "anthropic",
        "google-genai",
    ],
    extras_require={
        "test": [
            "pytest",
            "hypothesis",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "video-composer=cli:cli",
            "video-composer-api=api.app:serve",
        ],
    },
    python_requires=">=3.9",
)
