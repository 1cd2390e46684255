from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="docimpl",
    version="0.1.0",
    description="Load-order independent implementor lists for static documentation browsers",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    package_data={"docimpl._frontend": ["dist/*.html", "dist/assets/*"]},
    include_package_data=True,
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    entry_points={
        "console_scripts": [
            "docimpl=docimpl.__main__:main",
        ],
    },
)
