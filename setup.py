from setuptools import find_packages, setup

setup(
    name="costar",
    version="0.1.0",
    description="Co-star graph builder and shortest collaboration path engine for movie credit dumps",
    packages=find_packages(include=["costar", "costar.*"]),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "api": ["fastapi>=0.110", "uvicorn>=0.27", "httpx>=0.27"],
        "test": ["pytest>=7.4", "fastapi>=0.110", "httpx>=0.27"],
    },
    entry_points={"console_scripts": ["costar=costar.cli:main"]},
)
