from setuptools import setup, find_packages

setup(
    name="creational-factories",
    version="0.1.0",
    description="Factory method and abstract factory with interface-only client code",
    author="Creational Patterns Team",
    python_requires=">=3.11",
    packages=find_packages(include=["creational", "creational.*", "config"]),
    install_requires=[
        "pydantic>=2.9.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.3.0",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3.11",
        "Topic :: Software Development :: Libraries",
    ],
)
