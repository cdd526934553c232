from setuptools import setup, find_namespace_packages

setup(
    name="bookshelf",
    version="0.1.0",
    packages=find_namespace_packages(include=['shelf*', 'shelf_cli*']),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "Click",
        "SQLAlchemy>=2.0",
        "requests",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "bookshelf=shelf_cli.main:main",
        ],
    },
)
