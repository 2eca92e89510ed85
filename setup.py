from setuptools import setup, find_packages

setup(
    name="autoline",
    version="0.1.0",
    description="autoline — terminal line editor with word-boundary autocorrection",
    packages=find_packages(include=["autoline", "autoline.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pyspellchecker",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "autoline=autoline.main:main",
        ],
    },
)
