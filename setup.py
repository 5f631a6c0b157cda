from setuptools import setup, find_packages

setup(
    name="vidshare",
    version="0.1",
    packages=find_packages(include=["vidshare", "vidshare.*"]),
    install_requires=[
        "fastapi",
        "uvicorn",
        "sqlalchemy>=2.0",
        "pydantic>=2",
        "pydantic-settings",
        "python-jose[cryptography]",
        "passlib[bcrypt]",
        "bcrypt<5",
        "python-multipart",
        "aiofiles",
    ],
    extras_require={
        "test": [
            "pytest",
            "httpx",
        ],
    },
    python_requires=">=3.10",
)
