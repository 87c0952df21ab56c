"""
Setup script for the hilo-client package.

Installs the hilo_client package from src/ together with two console
scripts: hilo-client (play a seat) and hilo-listen (print contract events).
"""

from setuptools import setup, find_packages

setup(
    name="hilo-client",
    version="1.0.0",
    description="HiLo player client - commit-reveal betting against an on-chain HiLo game",
    author="Course Staff",
    python_requires=">=3.10",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "web3>=7.0.0",
        "eth-abi>=5.0.0",
        "eth-utils>=4.0.0",
        "python-dotenv>=1.0.0",
        "pydantic>=2.5.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "build",
            "wheel",
        ],
    },
    entry_points={
        "console_scripts": [
            "hilo-client=hilo_client.cli:main",
            "hilo-listen=hilo_client.cli:listen_main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Education",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)
