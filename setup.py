from setuptools import find_packages, setup

setup(
    name="pixela-client",
    version="1.0.0",
    description="A Python client for the pixe.la habit-tracking API.",
    author="vainilie",
    packages=find_packages(include=["pixela", "pixela.*"]),
    install_requires=[
        "httpx",
        "pydantic>=2",
        "pydantic-settings",
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
)
