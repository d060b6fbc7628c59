from setuptools import setup, find_packages

setup(
    name="weighted-reservoir",
    version="0.1.0",
    description="One-pass weighted random sampling without replacement (Efraimidis-Spirakis reservoirs)",
    author="adamfilli",
    packages=find_packages(include=["weightedreservoir", "weightedreservoir.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "matplotlib",
        ],
    },
    include_package_data=True,
    python_requires=">=3.11",
)
