from pathlib import Path

from setuptools import find_packages, setup

BASE_DIR = Path(__file__).parent
README = (BASE_DIR / "README.md").read_text(encoding="utf-8")

setup(
    name="sample-app",
    version="1.0.0",
    description="FastAPI demo workload exposing info, health, readiness and liveness endpoints.",
    long_description=README,
    long_description_content_type="text/markdown",
    author="Platform Team",
    packages=find_packages(include=["sample_app", "sample_app.*"]),
    python_requires=">=3.9",
    include_package_data=True,
    install_requires=[
        "fastapi>=0.115.0",
        "uvicorn[standard]>=0.32.0",
        "psutil>=5.9.0",
        "pydantic>=2.0",
        "requests>=2.32.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "httpx>=0.27.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "sample-app=sample_app.main:main",
            "sample-app-probe=sample_app.probe:main",
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
