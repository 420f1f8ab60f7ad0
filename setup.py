from setuptools import setup, find_packages

setup(
    name="lca-sim",
    version="0.1.0",
    packages=find_packages(exclude=["tests"]),
    py_modules=["run_simulation"],
    install_requires=[
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": [
            "pytest",
            "scipy",
        ],
    },
    entry_points={
        "console_scripts": [
            "lca-run=run_simulation:main",
        ],
    },
    license="MIT",
)
