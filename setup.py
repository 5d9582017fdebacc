from setuptools import setup, find_packages

setup(
    name="lemke_lcp",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy",
        "sympy",
        "scipy",
        "pydantic>=2"
    ],
    extras_require={
        "test": ["pytest"]
    },
    python_requires=">=3.8",
)
