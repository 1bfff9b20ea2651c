from setuptools import setup, find_packages

install_requires = [
    # --- UI ---
    "flet>=0.70.0",

    # --- STORAGE ---
    "duckdb>=0.10.0",
    "pydantic>=2.0.0",

    # --- CONFIG ---
    "python-dotenv>=1.0.0",
    "pyyaml>=6.0.0",

    # --- TESTS---
    "pytest-asyncio==1.3.0",
    "pytest"
]

setup(
    name="jump",
    version="0.1.0",
    description="Jump - local bookmark launcher",
    packages=find_packages(exclude=("tests", "tests.*")),
    include_package_data=True,
    package_data={"jump.shared.config": ["settings/*.yaml"]},
    install_requires=install_requires,
    entry_points={
        "console_scripts": [
            "jump=jump.launcher.main:run",
        ],
    },
    python_requires=">=3.11",
)
