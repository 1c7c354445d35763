from setuptools import setup, find_packages

setup(
    name="atomiclang",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["atomic"],
    package_data={"atomiclang": ["grammar.lark"]},
    include_package_data=True,
    install_requires=[
        "lark",
        "pydantic>=2.0",
        "loguru>=0.7",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "atomic=atomic:main",
        ],
    },
    python_requires=">=3.8",
)
